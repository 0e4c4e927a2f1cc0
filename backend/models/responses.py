from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    # JSON uses camelCase keys; Python attributes stay snake_case
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class SectionStatus(_CamelModel):
    name: str
    present: bool


class JobMatch(_CamelModel):
    percentage: int = 0
    matched_skills: int = 0
    total_skills: int = 0


class SkillBreakdown(_CamelModel):
    category: str
    match: int = 0
    missing: list[str] = []


class Analysis(_CamelModel):
    sections: list[SectionStatus] = []
    job_match: JobMatch = JobMatch()
    skill_breakdown: list[SkillBreakdown] = []


class AnalysisResult(_CamelModel):
    score: int = 0
    analysis: Analysis = Analysis()
    missing_skills: list[str] = []
    strengths: list[str] = []
    suggestions: list[str] = []
    format_issues: list[str] = []


class AnalyzeResponse(BaseModel):
    result: AnalysisResult


class ErrorResponse(BaseModel):
    error: str
    details: str = ""
