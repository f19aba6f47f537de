"""Weighted three-factor relevance score for a (candidate, job) pair.

    skills      60 points  share of the job's skills the candidate has
    location    20 points  candidate location named in the posting (15 if remote)
    experience  20 points  candidate years inside the job's experience band
                           (10 if within 2 years of the band midpoint)

The weights sum to 100, so the total never needs clamping.
"""

import logging
from enum import Enum

from models.schemas.candidate_profile import CandidateProfile
from models.schemas.job_requirement import JobRequirement
from models.schemas.job_summary import JobSummary
from models.schemas.match_result import MatchResult
from models.schemas.skill import SkillToken
from services.skill_extractor import partition_skills

logger = logging.getLogger(__name__)

SKILL_WEIGHT = 60
LOCATION_WEIGHT = 20
REMOTE_WEIGHT = 15
EXPERIENCE_WEIGHT = 20
CLOSE_EXPERIENCE_WEIGHT = 10

MAX_CLOSE_EXPERIENCE_GAP = 2
MAX_REASON_SKILLS = 3
NO_MATCH_REASON = "No specific matches found"


class ExperienceBand(Enum):
    """Experience buckets: (descriptor markers, min years, max years, midpoint)."""
    ENTRY = (("entry", "junior", "0-2"), 0, 2, 1)
    MID = (("mid", "2-5", "3-5"), 2, 5, 3)
    SENIOR = (("senior", "5+", "lead"), 5, None, 6)

    def __init__(self, markers: tuple[str, ...], min_years: int, max_years: int | None, midpoint: int) -> None:
        self.markers = markers
        self.min_years = min_years
        self.max_years = max_years
        self.midpoint = midpoint

    def contains(self, years: int) -> bool:
        if years < self.min_years:
            return False
        return self.max_years is None or years <= self.max_years

    @classmethod
    def from_descriptor(cls, descriptor: str) -> "ExperienceBand | None":
        """Bucket a free-text descriptor; None when no marker is recognized."""
        text = descriptor.lower()
        for band in cls:
            if any(marker in text for marker in band.markers):
                return band
        return None


class MatchScorer:
    """Scores a single job for a single candidate. Stateless."""

    def score(self, candidate: CandidateProfile, job: JobRequirement) -> MatchResult:
        reasons: list[str] = []

        skill_points, missing = self._score_skills(candidate, job, reasons)
        location_points = self._score_location(candidate, job, reasons)
        experience_points = self._score_experience(candidate, job, reasons)
        total = skill_points + location_points + experience_points

        logger.debug(
            "Scored job %s for candidate %s: skills=%d location=%d experience=%d total=%d",
            job.job_id, candidate.candidate_id,
            skill_points, location_points, experience_points, total,
        )

        return MatchResult(
            job_id=job.job_id,
            title=job.title,
            score=total,
            match_reasons=tuple(reasons) or (NO_MATCH_REASON,),
            missing_skills=tuple(missing),
            job=JobSummary.of(job),
        )

    def _score_skills(
        self, candidate: CandidateProfile, job: JobRequirement, reasons: list[str],
    ) -> tuple[int, list[SkillToken]]:
        if not job.skills:
            return 0, []

        matched, missing = partition_skills(job.skills, candidate.skills)
        points = (SKILL_WEIGHT * len(matched)) // len(job.skills)

        if matched:
            names = ", ".join(s.display for s in matched[:MAX_REASON_SKILLS])
            reasons.append(
                f"Skills match: {len(matched)}/{len(job.skills)} required skills ({names})"
            )
        return points, missing

    def _score_location(self, candidate: CandidateProfile, job: JobRequirement, reasons: list[str]) -> int:
        text = job.free_text.lower()
        location = candidate.location.strip().lower()

        if location and location in text:
            reasons.append(f"Location match: {job.location or job.description}")
            return LOCATION_WEIGHT
        if "remote" in text:
            reasons.append("Remote work available")
            return REMOTE_WEIGHT
        return 0

    def _score_experience(self, candidate: CandidateProfile, job: JobRequirement, reasons: list[str]) -> int:
        if job.experience_level is None:
            return 0
        descriptor = job.experience_level.strip()

        band = ExperienceBand.from_descriptor(descriptor)
        years = candidate.years_experience

        # Unrecognized descriptors count as a match
        if band is None or band.contains(years):
            reasons.append(f"Experience level matches: {descriptor}")
            return EXPERIENCE_WEIGHT

        if abs(years - band.midpoint) <= MAX_CLOSE_EXPERIENCE_GAP:
            reasons.append("Close experience match")
            return CLOSE_EXPERIENCE_WEIGHT
        return 0
