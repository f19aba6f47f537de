import os
from pydantic_settings import BaseSettings


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    debug: bool = False
    log_level: str = "INFO"
    rate_limit: str = "30/minute"  # slowapi limit string, applied per route

    # Matching engine settings
    default_recommendation_limit: int = 10
    ranker_max_workers: int = 4  # 1 scores jobs sequentially
    gap_fallback_skills: list[str] = ["java", "spring boot", "aws", "docker"]  # [] disables the fallback
    profile_data_path: str = ""  # JSON profile data; empty uses the bundled sample

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
