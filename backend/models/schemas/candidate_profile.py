"""Candidate side of a match: what the resolver knows about a job seeker."""

from pydantic import BaseModel, ConfigDict, Field

from models.schemas.skill import SkillToken


class CandidateProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    candidate_id: str
    skills: frozenset[SkillToken] = frozenset()
    years_experience: int = Field(default=0, ge=0)
    location: str = ""
