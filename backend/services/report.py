"""Downloadable plain-text report for an analysis result."""

from models.responses import AnalysisResult

REPORT_FILENAME = "resume-analysis-report.txt"


def _bullets(items: list[str]) -> str:
    return "\n".join(f"- {item}" for item in items)


def build_report(result: AnalysisResult) -> str:
    return (
        "Resume Analysis Report\n"
        "=====================\n"
        "\n"
        f"Score: {result.score:.2f}/100\n"
        "\n"
        "Missing Skills:\n"
        f"{_bullets(result.missing_skills)}\n"
        "\n"
        "Format Issues:\n"
        f"{_bullets(result.format_issues)}\n"
        "\n"
        "Strengths:\n"
        f"{_bullets(result.strengths)}\n"
        "\n"
        "Suggestions for Improvement:\n"
        f"{_bullets(result.suggestions)}\n"
    )
