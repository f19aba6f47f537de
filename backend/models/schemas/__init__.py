"""Pydantic contracts shared by the matching engine components."""

from models.schemas.skill import SkillToken
from models.schemas.candidate_profile import CandidateProfile
from models.schemas.job_requirement import JobRequirement
from models.schemas.job_summary import JobSummary
from models.schemas.match_result import MatchResult
from models.schemas.gap_report import (
    GapReport,
    LearningResource,
    MatchStatus,
    MissingSkillGap,
    ResourceType,
    SkillMatch,
    SkillPriority,
)

__all__ = [
    "SkillToken",
    "CandidateProfile",
    "JobRequirement",
    "MatchResult",
    "GapReport",
    "JobSummary",
    "LearningResource",
    "MatchStatus",
    "MissingSkillGap",
    "ResourceType",
    "SkillMatch",
    "SkillPriority",
]
