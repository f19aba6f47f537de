from fastapi import APIRouter, Depends, Query, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_matching_service
from config import settings
from models.responses import HealthResponse, RecommendationsResponse
from models.schemas.gap_report import GapReport
from services.matching.orchestrator import MatchingService

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health", response_model=HealthResponse)
def health(service: MatchingService = Depends(get_matching_service)):
    jobs = service.resolver.list_available_jobs()
    return HealthResponse(status="ok", jobs=len(jobs))


@router.get("/recommendations", response_model=RecommendationsResponse)
@limiter.limit(settings.rate_limit)
def recommendations(
    request: Request,
    candidate_id: str = Query(..., min_length=1),
    # non-positive limits reach the service, which answers 400
    limit: int = Query(settings.default_recommendation_limit),
    service: MatchingService = Depends(get_matching_service),
):
    results = service.get_recommendations(candidate_id, limit)
    return RecommendationsResponse(
        candidate_id=candidate_id,
        count=len(results),
        recommendations=results,
    )


@router.get("/skill-gap-analysis", response_model=GapReport)
@limiter.limit(settings.rate_limit)
def skill_gap_analysis(
    request: Request,
    candidate_id: str = Query(..., min_length=1),
    job_id: str = Query(..., min_length=1),
    service: MatchingService = Depends(get_matching_service),
):
    return service.analyze_gap(candidate_id, job_id)
