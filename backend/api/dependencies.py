"""Shared dependencies for API routes."""

from services.matching.orchestrator import MatchingService
from services.matching.registry import get_service


def get_matching_service() -> MatchingService:
    return get_service()
