"""Scorer output: one relevance score per (candidate, job) pair."""

from pydantic import BaseModel, ConfigDict, Field

from models.schemas.job_summary import JobSummary
from models.schemas.skill import SkillToken


class MatchResult(BaseModel):
    """Relevance of a single job to a candidate.

    ``match_reasons`` is in discovery order: skills, then location, then
    experience. It is never empty; a zero score still carries a
    placeholder reason. ``job`` carries enough of the posting (company,
    location, required skills) to display the recommendation without a
    second lookup.
    """
    model_config = ConfigDict(frozen=True)

    job_id: str
    title: str = ""
    score: int = Field(ge=0, le=100)
    match_reasons: tuple[str, ...] = ()
    missing_skills: tuple[SkillToken, ...] = ()
    job: JobSummary
