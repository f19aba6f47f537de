"""Lazily built, process-wide MatchingService.

Global singleton, built from settings on first use.
"""

import logging

from config import settings
from services.matching.gap_analyzer import GapAnalyzer
from services.matching.orchestrator import MatchingService
from services.matching.ranker import RecommendationRanker
from services.profile_resolver import load_profile_resolver
from services.skill_extractor import SkillExtractor

logger = logging.getLogger(__name__)

_service: MatchingService | None = None


def _create_service() -> MatchingService:
    resolver = load_profile_resolver(settings.profile_data_path or None)
    extractor = SkillExtractor()
    return MatchingService(
        resolver=resolver,
        extractor=extractor,
        ranker=RecommendationRanker(max_workers=settings.ranker_max_workers),
        gap_analyzer=GapAnalyzer(
            extractor=extractor,
            fallback_skills=settings.gap_fallback_skills,
        ),
    )


def get_service() -> MatchingService:
    """Get the matching service, creating it on first access."""
    global _service
    if _service is None:
        logger.info("Building matching service")
        _service = _create_service()
    return _service


def clear() -> None:
    """Drop the cached service. Useful for testing."""
    global _service
    _service = None
