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

    # WordPress job board (external content system)
    wp_site_url: str = ""
    wp_username: str = ""
    wp_application_password: str = ""
    wp_api_path: str = "/wp-json/wp/v2"
    wp_timeout_seconds: float = 15.0

    # Optimization queue
    batch_size: int = 10
    auto_optimize: bool = True
    optimization_schedule: str = "every_6_hours"

    # Per-client limit on the stateless engine endpoints
    rate_limit: str = "30/minute"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
