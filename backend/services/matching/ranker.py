"""Rank a pool of jobs for one candidate."""

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from models.schemas.candidate_profile import CandidateProfile
from models.schemas.job_requirement import JobRequirement
from models.schemas.match_result import MatchResult
from services.errors import InvalidArgumentError
from services.matching.match_scorer import MatchScorer

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10


def validate_limit(limit: int) -> int:
    if limit <= 0:
        raise InvalidArgumentError(f"limit must be positive, got {limit}")
    return limit


class RecommendationRanker:
    """Scores every job, drops non-matches, sorts and truncates.

    With ``max_workers > 1`` the scoring phase runs on a thread pool. The
    sort happens once, after every score is in, and is stable: jobs with
    equal scores keep their input order.
    """

    def __init__(self, scorer: MatchScorer | None = None, max_workers: int = 1) -> None:
        self._scorer = scorer or MatchScorer()
        self._max_workers = max(1, max_workers)

    def rank(
        self,
        candidate: CandidateProfile,
        jobs: Sequence[JobRequirement],
        limit: int = DEFAULT_LIMIT,
    ) -> list[MatchResult]:
        validate_limit(limit)

        results = self._score_all(candidate, jobs)
        matches = [r for r in results if r.score > 0]
        # sorted() is stable; negating the key keeps ties in input order
        ranked = sorted(matches, key=lambda r: -r.score)

        logger.info(
            "Ranked %d jobs for candidate %s: %d with score > 0, returning %d",
            len(jobs), candidate.candidate_id, len(matches), min(limit, len(ranked)),
        )
        return ranked[:limit]

    def _score_all(self, candidate: CandidateProfile, jobs: Sequence[JobRequirement]) -> list[MatchResult]:
        if self._max_workers == 1 or len(jobs) < 2:
            return [self._scorer.score(candidate, job) for job in jobs]

        with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
            # map() yields in submission order regardless of completion order
            return list(pool.map(lambda job: self._scorer.score(candidate, job), jobs))
