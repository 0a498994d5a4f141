import json
from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode


class Settings(BaseSettings):
    # CORS_ORIGINS: comma-separated string or JSON list
    cors_origins: Annotated[list[str], NoDecode] = ["http://localhost:5173"]
    debug: bool = False
    log_level: str = "INFO"

    # Record snapshot and taxonomy sources
    data_file: str = ""  # JSON {"users": [...], "jobs": [...]}; empty = empty store
    skill_taxonomy_path: str = ""  # empty = bundled services/data/skill_taxonomy.yaml

    # Ranking settings
    default_top_n_applicants: int = 10
    default_top_n_jobs: int = 5
    max_top_n: int = 50
    recency_window_days: int = 7

    rate_limit: str = "30/minute"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_origins(cls, value):
        if not isinstance(value, str):
            return value
        value = value.strip()
        if value.startswith("["):
            return json.loads(value)
        return [o.strip() for o in value.split(",") if o.strip()]


settings = Settings()
