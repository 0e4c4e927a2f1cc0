"""Orchestrator: keyword-based resume vs job description analysis.

Pipeline:
1. Normalize both documents (lowercase)
2. Hard-skill matching per taxonomy category
3. Soft-skill family matching
4. Section detection
5. Content quality checks on the raw resume text
6. Score composition
7. Strengths, suggestions and format issues

Every step is a pure function of the two input strings and the read-only
taxonomy, so `analyze` is deterministic and safe to call concurrently.
"""

import logging

from models.responses import (
    Analysis,
    AnalysisResult,
    JobMatch,
    SectionStatus,
    SkillBreakdown,
)
from services import insights
from services.content_quality import analyze_content
from services.scoring import compose_score
from services.section_detector import detect_sections
from services.skill_matcher import (
    job_match_percentage,
    match_hard_skills,
    match_soft_skills,
    normalize,
)

logger = logging.getLogger(__name__)


def analyze(resume_text: str, job_description: str) -> AnalysisResult:
    """Score a resume against a job description and explain the result."""
    resume_lower = normalize(resume_text)
    job_lower = normalize(job_description)

    # --- Analyzers (independent of each other) ---
    hard = match_hard_skills(resume_lower, job_lower)
    soft = match_soft_skills(resume_lower, job_lower)
    sections = detect_sections(resume_lower)
    content = analyze_content(resume_text)

    # --- Score ---
    score = compose_score(hard, soft, sections, content)
    logger.debug(
        "Analysis score=%d hard=%d/%d soft=%d/%d missing_sections=%d",
        score,
        hard.matched_skills,
        hard.total_job_skills,
        soft.matched_soft_skills,
        soft.total_soft_skills,
        len(sections.missing_sections),
    )

    return AnalysisResult(
        score=score,
        analysis=Analysis(
            sections=[
                SectionStatus(name=s.name, present=s.present) for s in sections.sections
            ],
            job_match=JobMatch(
                percentage=job_match_percentage(hard),
                matched_skills=hard.matched_skills,
                total_skills=hard.total_job_skills,
            ),
            skill_breakdown=[
                SkillBreakdown(
                    category=match.category,
                    match=match.percentage,
                    missing=list(match.missing),
                )
                for match in hard.categories
            ],
        ),
        missing_skills=insights.missing_skills(hard),
        strengths=insights.strengths(hard, soft, content),
        suggestions=insights.suggestions(hard),
        format_issues=insights.format_issues(content, sections),
    )
