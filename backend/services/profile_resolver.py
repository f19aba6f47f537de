"""Profile lookup boundary between the matching engine and persistence.

The engine only ever talks to a ``ProfileResolver``. The in-memory
implementation here backs the API with a JSON file; a database-backed
resolver would subclass the same base.
"""

import json
import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from pathlib import Path

from pydantic import BaseModel

from models.schemas.candidate_profile import CandidateProfile
from models.schemas.job_requirement import JobRequirement
from services.errors import NotFoundError

logger = logging.getLogger(__name__)

SAMPLE_DATA_PATH = Path(__file__).parent / "data" / "sample_profiles.json"


class ProfileResolver(ABC):
    """Supplies candidate and job records to the engine.

    Subclasses must implement:
        - get_candidate_profile(): raise NotFoundError for unknown ids
        - get_job_requirement(): raise NotFoundError for unknown ids
        - list_available_jobs(): may return an empty sequence
    """

    @abstractmethod
    def get_candidate_profile(self, candidate_id: str) -> CandidateProfile:
        """Look up a candidate by id."""

    @abstractmethod
    def get_job_requirement(self, job_id: str) -> JobRequirement:
        """Look up a job by id."""

    @abstractmethod
    def list_available_jobs(self) -> Sequence[JobRequirement]:
        """All jobs open for recommendation, in a stable order."""


class ProfileData(BaseModel):
    """On-disk layout of a profile data file."""
    candidates: list[CandidateProfile] = []
    jobs: list[JobRequirement] = []


class InMemoryProfileResolver(ProfileResolver):

    def __init__(
        self,
        candidates: Iterable[CandidateProfile] = (),
        jobs: Iterable[JobRequirement] = (),
    ) -> None:
        self._candidates = {c.candidate_id: c for c in candidates}
        # dict keeps insertion order, which list_available_jobs relies on
        self._jobs = {j.job_id: j for j in jobs}

    def get_candidate_profile(self, candidate_id: str) -> CandidateProfile:
        try:
            return self._candidates[candidate_id]
        except KeyError:
            raise NotFoundError("candidate", candidate_id) from None

    def get_job_requirement(self, job_id: str) -> JobRequirement:
        try:
            return self._jobs[job_id]
        except KeyError:
            raise NotFoundError("job", job_id) from None

    def list_available_jobs(self) -> list[JobRequirement]:
        return list(self._jobs.values())


def load_profile_resolver(path: str | Path | None = None) -> InMemoryProfileResolver:
    """Build a resolver from a JSON file of ``{"candidates": [...], "jobs": [...]}``.

    Falls back to the bundled sample data when no path is given.
    """
    data_path = Path(path) if path else SAMPLE_DATA_PATH
    with open(data_path, encoding="utf-8") as f:
        data = ProfileData.model_validate(json.load(f))

    logger.info(
        "Loaded %d candidates and %d jobs from %s",
        len(data.candidates), len(data.jobs), data_path,
    )
    return InMemoryProfileResolver(data.candidates, data.jobs)
