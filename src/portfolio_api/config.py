"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Database
    mongodb_uri: str | None = None
    database_name: str = "portfolio"
    projects_collection: str = "projects"
    server_selection_timeout_ms: int = 5000

    # CORS (permissive: the portfolio front end may be served from anywhere)
    cors_allowed_origins: list[str] = ["*"]

    # Server
    host: str = "0.0.0.0"
    port: int = 3001
    log_level: str = "info"
    log_json: bool = False

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
