from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

from config import settings


class QuickAnalyzeRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    resume_text: str = Field(..., min_length=1, description="Plain text resume content")
    job_description: str = Field(..., min_length=1, description="Job description text")

    @field_validator("resume_text", "job_description")
    @classmethod
    def _check_content(cls, value: str, info: ValidationInfo) -> str:
        """Reject blank or oversized text; the value itself is passed on untouched."""
        if not value.strip():
            raise ValueError("must not be blank")
        limit = (
            settings.max_resume_chars
            if info.field_name == "resume_text"
            else settings.max_job_description_chars
        )
        if len(value) > limit:
            raise ValueError(f"must be at most {limit} characters")
        return value
