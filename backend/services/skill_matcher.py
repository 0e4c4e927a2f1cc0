"""Keyword matching of a resume against a job description.

Matching is plain substring containment on lowercased text: no tokenization,
stemming or synonym resolution, so multi-word keywords like "rest api" only
match when they appear verbatim.
"""

import math

from models.schemas.skills_match import (
    CategoryMatch,
    HardSkillAnalysis,
    SoftSkillAnalysis,
    SoftSkillMatch,
)
from services.taxonomy import HARD_SKILLS, SOFT_SKILLS


def normalize(text: str) -> str:
    """Lowercase copy used for every containment check."""
    return text.lower()


def contains(normalized_text: str, keyword: str) -> bool:
    return normalize(keyword) in normalized_text


def percentage(part: int, whole: int) -> int:
    """Whole-number percentage rounded half up; 0 when `whole` is 0."""
    if whole == 0:
        return 0
    return math.floor(part / whole * 100 + 0.5)


def match_hard_skills(resume_lower: str, job_lower: str) -> HardSkillAnalysis:
    """Match every hard-skill category required by the JD against the resume.

    Categories with no keyword in the JD are left out entirely.
    """
    categories: list[CategoryMatch] = []
    total_job_skills = 0
    matched_skills = 0

    for category, keywords in HARD_SKILLS.items():
        required = tuple(kw for kw in keywords if contains(job_lower, kw))
        if not required:
            continue
        matched = tuple(kw for kw in required if contains(resume_lower, kw))
        categories.append(
            CategoryMatch(
                category=category,
                required=required,
                matched=matched,
                percentage=percentage(len(matched), len(required)),
            )
        )
        total_job_skills += len(required)
        matched_skills += len(matched)

    return HardSkillAnalysis(
        categories=tuple(categories),
        total_job_skills=total_job_skills,
        matched_skills=matched_skills,
    )


def match_soft_skills(resume_lower: str, job_lower: str) -> SoftSkillAnalysis:
    """Check each soft-skill family the JD mentions for presence in the resume."""
    categories: list[SoftSkillMatch] = []
    for category, keywords in SOFT_SKILLS.items():
        if not any(contains(job_lower, kw) for kw in keywords):
            continue
        present = any(contains(resume_lower, kw) for kw in keywords)
        categories.append(SoftSkillMatch(category=category, required=True, present=present))

    return SoftSkillAnalysis(
        categories=tuple(categories),
        total_soft_skills=len(categories),
        matched_soft_skills=sum(1 for c in categories if c.present),
    )


def job_match_percentage(analysis: HardSkillAnalysis) -> int:
    """Aggregate match over all required hard skills (0 when nothing was required)."""
    return percentage(analysis.matched_skills, analysis.total_job_skills)
