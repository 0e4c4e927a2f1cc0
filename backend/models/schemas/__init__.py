"""Intermediate analyzer outputs consumed by scoring and insights."""

from models.schemas.resume_structure import ContentQuality, SectionAnalysis, SectionPresence
from models.schemas.skills_match import (
    CategoryMatch,
    HardSkillAnalysis,
    SoftSkillAnalysis,
    SoftSkillMatch,
)

__all__ = [
    "CategoryMatch",
    "ContentQuality",
    "HardSkillAnalysis",
    "SectionAnalysis",
    "SectionPresence",
    "SoftSkillAnalysis",
    "SoftSkillMatch",
]
