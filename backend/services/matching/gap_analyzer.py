"""Skill-gap analysis between one candidate and one job.

For every skill the job requires, the candidate either has it (SkillMatch)
or lacks it (MissingSkillGap with a learning priority, resources and a
time estimate). The two lists partition the required skills exactly.

Required skills come from the job description. Sparse descriptions that
yield no known skills are analyzed against a fallback skill set instead,
which keeps the report useful but is a heuristic: the fallback says
nothing about what that particular job actually needs.
"""

import logging
from collections.abc import Sequence

from models.schemas.candidate_profile import CandidateProfile
from models.schemas.gap_report import (
    GapReport,
    MatchStatus,
    MissingSkillGap,
    SkillMatch,
    SkillPriority,
)
from models.schemas.job_requirement import JobRequirement
from models.schemas.job_summary import JobSummary
from models.schemas.skill import SkillToken
from services.matching.learning_catalog import LearningCatalog
from services.matching.recommendation_text import RecommendationTextGenerator
from services.skill_extractor import SkillExtractor, partition_skills

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_SKILLS: tuple[str, ...] = ("java", "spring boot", "aws", "docker")
DEFAULT_CRITICAL_SKILLS: tuple[str, ...] = (
    "java", "python", "javascript", "aws", "spring boot", "react",
)
ASSUMED_LEVEL = "Advanced"
MEDIUM_PRIORITY_MIN_MENTIONS = 3


def match_percentage(matched: int, required: int) -> int:
    """round(100 * matched / required), halves rounding up; 100 when nothing is required."""
    if required == 0:
        return 100
    return (200 * matched + required) // (2 * required)


class GapAnalyzer:

    def __init__(
        self,
        extractor: SkillExtractor | None = None,
        catalog: LearningCatalog | None = None,
        text_generator: RecommendationTextGenerator | None = None,
        fallback_skills: Sequence[str] = DEFAULT_FALLBACK_SKILLS,
        critical_skills: Sequence[str] = DEFAULT_CRITICAL_SKILLS,
    ) -> None:
        self._extractor = extractor or SkillExtractor()
        self._catalog = catalog or LearningCatalog()
        self._text_generator = text_generator or RecommendationTextGenerator()
        self._fallback_skills = tuple(dict.fromkeys(SkillToken.of(s) for s in fallback_skills))
        self._critical_skills = frozenset(SkillToken.of(s) for s in critical_skills)

    def analyze(self, candidate: CandidateProfile, job: JobRequirement) -> GapReport:
        required = self.required_skills(job)
        matched, missing = partition_skills(required, candidate.skills)

        # TODO: emit EXCEEDS/BELOW once profiles carry per-skill proficiency
        matching_skills = [
            SkillMatch(
                skill=skill,
                candidate_level=ASSUMED_LEVEL,
                required_level=ASSUMED_LEVEL,
                status=MatchStatus.MATCHES,
            )
            for skill in matched
        ]
        missing_skills = [
            MissingSkillGap(
                skill=skill,
                required_level=ASSUMED_LEVEL,
                priority=self.priority_for(skill, job),
                learning_resources=self._catalog.resources_for(skill),
                estimated_learning_time=self._catalog.learning_time_for(skill),
            )
            for skill in missing
        ]

        percentage = match_percentage(len(matched), len(required))
        recommendations = self._text_generator.generate(
            percentage, matching_skills, missing_skills,
        )

        logger.info(
            "Gap analysis for candidate %s and job %s: %d/%d skills matched (%d%%)",
            candidate.candidate_id, job.job_id, len(matched), len(required), percentage,
        )

        return GapReport(
            match_percentage=percentage,
            matching_skills=tuple(matching_skills),
            missing_skills=tuple(missing_skills),
            recommendations=tuple(recommendations),
            job=JobSummary.of(job, required_skills=required),
        )

    def required_skills(self, job: JobRequirement) -> tuple[SkillToken, ...]:
        skills = self._extractor.extract(job.description)
        if skills:
            return skills
        if self._fallback_skills:
            logger.warning(
                "No known skills in description of job %s, using fallback set: %s",
                job.job_id, ", ".join(s.name for s in self._fallback_skills),
            )
        return self._fallback_skills

    def priority_for(self, skill: SkillToken, job: JobRequirement) -> SkillPriority:
        """First rule that applies wins: title, critical list, repeated mentions."""
        if skill.name in job.title.lower():
            return SkillPriority.HIGH
        if skill in self._critical_skills:
            return SkillPriority.HIGH
        if job.description.lower().count(skill.name) >= MEDIUM_PRIORITY_MIN_MENTIONS:
            return SkillPriority.MEDIUM
        return SkillPriority.LOW
