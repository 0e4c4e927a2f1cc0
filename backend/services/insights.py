"""Human-readable feedback derived from the analyzer outputs."""

from models.schemas.resume_structure import ContentQuality, SectionAnalysis
from models.schemas.skills_match import HardSkillAnalysis, SoftSkillAnalysis
from services.content_quality import MIN_LENGTH

STRENGTH_THRESHOLD = 0.7
SUGGESTION_THRESHOLD = 70

DEFAULT_STRENGTH = "Good overall presentation"
DEFAULT_SUGGESTION = "Your resume is well-aligned with the job requirements"
DEFAULT_FORMAT_ISSUE = "No major format issues found"


def _exceeds(part: int, whole: int, threshold: float) -> bool:
    # Nothing required means there is nothing to praise
    if whole == 0:
        return False
    return part / whole > threshold


def strengths(
    hard: HardSkillAnalysis, soft: SoftSkillAnalysis, content: ContentQuality
) -> list[str]:
    found = []
    if _exceeds(hard.matched_skills, hard.total_job_skills, STRENGTH_THRESHOLD):
        found.append("Strong technical skill match with job requirements")
    if _exceeds(soft.matched_soft_skills, soft.total_soft_skills, STRENGTH_THRESHOLD):
        found.append("Excellent soft skills alignment")
    if content.has_quantifiable_results:
        found.append("Good use of quantifiable achievements")
    return found or [DEFAULT_STRENGTH]


def suggestions(hard: HardSkillAnalysis) -> list[str]:
    found = [
        f"Strengthen {match.category} skills: {', '.join(match.missing)}"
        for match in hard.categories
        if match.percentage < SUGGESTION_THRESHOLD
    ]
    return found or [DEFAULT_SUGGESTION]


def format_issues(content: ContentQuality, sections: SectionAnalysis) -> list[str]:
    found = []
    if not content.has_proper_length:
        if content.length < MIN_LENGTH:
            found.append("Resume is too brief - add more detailed experience")
        else:
            found.append("Resume is too long - aim for 1-2 pages")
    if not content.has_bullet_points:
        found.append("Use bullet points to better structure your experience")
    missing = sections.missing_sections
    if missing:
        found.append(f"Add missing sections: {', '.join(missing)}")
    return found or [DEFAULT_FORMAT_ISSUE]


def missing_skills(hard: HardSkillAnalysis) -> list[str]:
    """One "category: kw, kw" line per category with unmatched keywords."""
    return [
        f"{match.category}: {', '.join(match.missing)}"
        for match in hard.categories
        if match.missing
    ]
