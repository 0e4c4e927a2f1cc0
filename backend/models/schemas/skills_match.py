"""Skill matcher output: per-category hard-skill and soft-skill matches."""

from pydantic import BaseModel, ConfigDict


class CategoryMatch(BaseModel):
    """Hard-skill keywords of one category required by the JD and found in the resume."""
    model_config = ConfigDict(frozen=True)

    category: str
    required: tuple[str, ...]  # taxonomy order
    matched: tuple[str, ...]  # subset of required, taxonomy order
    percentage: int

    @property
    def missing(self) -> tuple[str, ...]:
        return tuple(kw for kw in self.required if kw not in self.matched)


class HardSkillAnalysis(BaseModel):
    """Aggregate of every hard-skill category with at least one required keyword."""
    model_config = ConfigDict(frozen=True)

    categories: tuple[CategoryMatch, ...] = ()
    total_job_skills: int = 0
    matched_skills: int = 0


class SoftSkillMatch(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: str
    required: bool = True
    present: bool = False


class SoftSkillAnalysis(BaseModel):
    """Soft-skill families the JD asks for, and whether the resume shows them."""
    model_config = ConfigDict(frozen=True)

    categories: tuple[SoftSkillMatch, ...] = ()
    total_soft_skills: int = 0
    matched_soft_skills: int = 0
