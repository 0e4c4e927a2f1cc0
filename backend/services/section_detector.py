"""Resume structure detection by section keyword presence."""

from models.schemas.resume_structure import SectionAnalysis, SectionPresence
from services.skill_matcher import contains
from services.taxonomy import SECTIONS


def detect_sections(resume_lower: str) -> SectionAnalysis:
    """Mark each canonical section present if any of its keywords occurs in the resume.

    Expects already-normalized (lowercased) text. Sections keep taxonomy order.
    """
    return SectionAnalysis(
        sections=tuple(
            SectionPresence(
                name=section,
                present=any(contains(resume_lower, kw) for kw in keywords),
            )
            for section, keywords in SECTIONS.items()
        )
    )
