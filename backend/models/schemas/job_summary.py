"""Compact view of a job, attached to recommendations and gap reports."""

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict

from models.schemas.job_requirement import JobRequirement
from models.schemas.skill import SkillToken


class JobSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    job_id: str
    title: str
    company: str = ""
    location: str = ""
    experience_level: str | None = None
    required_skills: tuple[SkillToken, ...] = ()

    @classmethod
    def of(cls, job: JobRequirement, required_skills: Sequence[SkillToken] | None = None) -> "JobSummary":
        """Summarize ``job``; ``required_skills`` overrides the job's own list."""
        return cls(
            job_id=job.job_id,
            title=job.title,
            company=job.company,
            location=job.location,
            experience_level=job.experience_level,
            required_skills=tuple(job.skills if required_skills is None else required_skills),
        )
