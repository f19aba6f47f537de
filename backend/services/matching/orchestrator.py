"""Matching service: wires the resolver to the scoring components.

Flow:
    candidate_id (+ job_id)
      ├─ ProfileResolver              → CandidateProfile, JobRequirement(s)
      ├─ SkillExtractor               → job skills, when the record has none
      │
      ├─ get_recommendations:
      │     RecommendationRanker      → MatchScorer per job → sorted MatchResults
      │
      └─ analyze_gap:
            GapAnalyzer               → GapReport (+ RecommendationTextGenerator)

Resolver errors (NotFoundError) pass through untouched.
"""

import logging

from models.schemas.gap_report import GapReport
from models.schemas.job_requirement import JobRequirement
from models.schemas.match_result import MatchResult
from services.matching.gap_analyzer import GapAnalyzer
from services.matching.ranker import DEFAULT_LIMIT, RecommendationRanker, validate_limit
from services.profile_resolver import ProfileResolver
from services.skill_extractor import SkillExtractor

logger = logging.getLogger(__name__)


class MatchingService:

    def __init__(
        self,
        resolver: ProfileResolver,
        extractor: SkillExtractor | None = None,
        ranker: RecommendationRanker | None = None,
        gap_analyzer: GapAnalyzer | None = None,
    ) -> None:
        self.resolver = resolver
        self._extractor = extractor or SkillExtractor()
        self._ranker = ranker or RecommendationRanker()
        self._gap_analyzer = gap_analyzer or GapAnalyzer(extractor=self._extractor)

    def get_recommendations(self, candidate_id: str, limit: int = DEFAULT_LIMIT) -> list[MatchResult]:
        """Top ``limit`` jobs for a candidate, best first."""
        # Reject before touching the resolver
        validate_limit(limit)
        logger.info("Generating job recommendations for candidate %s (limit %d)", candidate_id, limit)

        candidate = self.resolver.get_candidate_profile(candidate_id)
        jobs = [self._with_skills(job) for job in self.resolver.list_available_jobs()]
        return self._ranker.rank(candidate, jobs, limit)

    def analyze_gap(self, candidate_id: str, job_id: str) -> GapReport:
        logger.info("Analyzing skill gap for candidate %s and job %s", candidate_id, job_id)

        candidate = self.resolver.get_candidate_profile(candidate_id)
        job = self.resolver.get_job_requirement(job_id)
        return self._gap_analyzer.analyze(candidate, job)

    def _with_skills(self, job: JobRequirement) -> JobRequirement:
        if job.skills:
            return job
        return job.model_copy(update={"skills": self._extractor.extract(job.description)})
