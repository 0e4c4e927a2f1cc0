"""Overall score composition.

The score starts at a baseline of 100, adds the technical and soft-skill
contributions, then subtracts structure and content-quality penalties before
being clamped to 0-100. When the JD requires nothing in a skill group, that
group contributes its full weight.
"""

import math

from models.schemas.resume_structure import ContentQuality, SectionAnalysis
from models.schemas.skills_match import HardSkillAnalysis, SoftSkillAnalysis

BASELINE = 100
W_TECHNICAL = 40
W_SOFT = 20
SECTION_PENALTY = 3
QUALITY_PENALTY = 4


def technical_contribution(hard: HardSkillAnalysis) -> float:
    if hard.total_job_skills > 0:
        return hard.matched_skills / hard.total_job_skills * W_TECHNICAL
    return W_TECHNICAL


def soft_contribution(soft: SoftSkillAnalysis) -> float:
    if soft.total_soft_skills > 0:
        return soft.matched_soft_skills / soft.total_soft_skills * W_SOFT
    return W_SOFT


def compose_score(
    hard: HardSkillAnalysis,
    soft: SoftSkillAnalysis,
    sections: SectionAnalysis,
    content: ContentQuality,
) -> int:
    """Combine all analyzer outputs into a single 0-100 score."""
    raw = (
        BASELINE
        + technical_contribution(hard)
        + soft_contribution(soft)
        - SECTION_PENALTY * len(sections.missing_sections)
        - QUALITY_PENALTY * content.failed_checks
    )
    return min(100, max(0, math.floor(raw + 0.5)))
