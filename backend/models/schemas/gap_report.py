"""Gap analyzer output: per-skill comparison with learning guidance."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from models.schemas.job_summary import JobSummary
from models.schemas.skill import SkillToken


class MatchStatus(str, Enum):
    EXCEEDS = "EXCEEDS"
    MATCHES = "MATCHES"
    BELOW = "BELOW"


class SkillPriority(str, Enum):
    HIGH = "HIGH"  # critical for the role
    MEDIUM = "MEDIUM"
    LOW = "LOW"  # nice to have


class ResourceType(str, Enum):
    VIDEO = "VIDEO"
    COURSE = "COURSE"
    DOCUMENTATION = "DOCUMENTATION"
    TUTORIAL = "TUTORIAL"
    BOOK = "BOOK"


class LearningResource(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    url: str
    duration: str
    type: ResourceType


class SkillMatch(BaseModel):
    """A required skill the candidate already has."""
    model_config = ConfigDict(frozen=True)

    skill: SkillToken
    candidate_level: str
    required_level: str
    status: MatchStatus


class MissingSkillGap(BaseModel):
    """A required skill the candidate lacks, with how to close the gap."""
    model_config = ConfigDict(frozen=True)

    skill: SkillToken
    required_level: str
    priority: SkillPriority
    learning_resources: tuple[LearningResource, ...] = ()
    estimated_learning_time: str


class GapReport(BaseModel):
    """Structured output of the GapAnalyzer.

    ``matching_skills`` and ``missing_skills`` partition the job's
    required skills exactly.
    """
    model_config = ConfigDict(frozen=True)

    match_percentage: int = Field(ge=0, le=100)
    matching_skills: tuple[SkillMatch, ...] = ()
    missing_skills: tuple[MissingSkillGap, ...] = ()
    recommendations: tuple[str, ...] = ()
    job: JobSummary
