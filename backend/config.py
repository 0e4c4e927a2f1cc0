import json
from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode


class Settings(BaseSettings):
    max_upload_size_mb: int = 5
    max_resume_chars: int = 50000
    max_job_description_chars: int = 10000
    cors_origins: Annotated[list[str], NoDecode] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    # When disabled, PDF uploads yield a placeholder asking for pasted text
    pdf_text_extraction: bool = True
    rate_limit: str = "10/minute"
    log_level: str = "INFO"
    debug: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _parse_cors_origins(cls, value):
        """Accept CORS_ORIGINS as comma-separated string or JSON list."""
        if isinstance(value, str):
            if value.startswith("["):
                return json.loads(value)
            return [o.strip() for o in value.split(",") if o.strip()]
        return value


settings = Settings()
