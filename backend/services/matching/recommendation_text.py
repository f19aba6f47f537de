"""Guidance text for a gap report.

Template-based and deterministic: a fit band chosen from the match
percentage, then the candidate's strengths, then the skills to learn
first.
"""

from collections.abc import Sequence
from enum import Enum
from typing import assert_never

from models.schemas.gap_report import MissingSkillGap, SkillMatch, SkillPriority

MAX_STRENGTHS = 3
MAX_PRIORITY_SKILLS = 2


class FitBand(str, Enum):
    EXCELLENT = "excellent"  # >= 80
    GOOD = "good"  # 60-79
    MODERATE = "moderate"  # 40-59
    STRETCH = "stretch"  # < 40

    @classmethod
    def for_percentage(cls, match_percentage: int) -> "FitBand":
        if match_percentage >= 80:
            return cls.EXCELLENT
        if match_percentage >= 60:
            return cls.GOOD
        if match_percentage >= 40:
            return cls.MODERATE
        return cls.STRETCH


def band_messages(band: FitBand) -> tuple[str, str]:
    if band is FitBand.EXCELLENT:
        return (
            "🎉 Excellent match! You meet most requirements for this role.",
            "Apply now - you're well-qualified for this position!",
        )
    elif band is FitBand.GOOD:
        return (
            "✅ Good match! You have a solid foundation for this role.",
            "Consider learning the missing skills to become a perfect fit.",
        )
    elif band is FitBand.MODERATE:
        return (
            "⚠️ Moderate match. You have some relevant skills.",
            "Focus on gaining the high-priority missing skills before applying.",
        )
    elif band is FitBand.STRETCH:
        return (
            "📚 This role may be challenging with your current skillset.",
            "Consider roles that better match your current skills.",
        )
    else:
        assert_never(band)


class RecommendationTextGenerator:

    def generate(
        self,
        match_percentage: int,
        matching_skills: Sequence[SkillMatch],
        missing_skills: Sequence[MissingSkillGap],
    ) -> list[str]:
        recs = list(band_messages(FitBand.for_percentage(match_percentage)))

        if matching_skills:
            top = ", ".join(m.skill.display for m in matching_skills[:MAX_STRENGTHS])
            recs.append(f"💪 Your strengths: {top}")

        high_priority = [g for g in missing_skills if g.priority is SkillPriority.HIGH]
        if high_priority:
            top = ", ".join(g.skill.display for g in high_priority[:MAX_PRIORITY_SKILLS])
            recs.append(f"🎯 Priority skills to learn: {top}")

        return recs
