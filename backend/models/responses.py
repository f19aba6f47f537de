from pydantic import BaseModel

from models.schemas.match_result import MatchResult


class HealthResponse(BaseModel):
    status: str = "ok"
    jobs: int = 0


class RecommendationsResponse(BaseModel):
    candidate_id: str
    count: int = 0
    recommendations: list[MatchResult] = []
