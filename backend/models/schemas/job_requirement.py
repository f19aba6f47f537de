"""Job side of a match: requirements as posted by the recruiter."""

from pydantic import BaseModel, ConfigDict, field_validator

from models.schemas.skill import SkillToken


class JobRequirement(BaseModel):
    """A job posting reduced to the fields the matching engine reads.

    ``skills`` keeps discovery order and never holds duplicates; it may be
    empty, in which case callers extract skills from ``description``.
    """
    model_config = ConfigDict(frozen=True)

    job_id: str
    title: str
    company: str = ""
    description: str = ""
    experience_level: str | None = None  # free text, e.g. "Senior (5+ years)"
    location: str = ""  # free text, may just say "Remote"
    skills: tuple[SkillToken, ...] = ()

    @field_validator("skills")
    @classmethod
    def _dedupe(cls, value: tuple[SkillToken, ...]) -> tuple[SkillToken, ...]:
        return tuple(dict.fromkeys(value))

    @property
    def free_text(self) -> str:
        """Location and description joined; what location matching scans."""
        return f"{self.location} {self.description}".strip()
