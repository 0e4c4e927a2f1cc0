import pytest

from models.responses import AnalysisResult
from services.resume_analyzer import analyze

SCENARIO_A_RESUME = "I led a team and developed an app using Python and React. Achieved 20% growth."
SCENARIO_A_JD = "Looking for Python, React, leadership, and teamwork."

SCENARIO_B_RESUME = "Contact: a@b.com"
SCENARIO_B_JD = "kubernetes, docker, aws"


def _breakdown(result: AnalysisResult) -> dict[str, tuple[int, list[str]]]:
    return {b.category: (b.match, b.missing) for b in result.analysis.skill_breakdown}


class TestScenarios:
    def test_scenario_a_skill_matches(self):
        result = analyze(SCENARIO_A_RESUME, SCENARIO_A_JD)
        assert _breakdown(result) == {
            "programming": (100, []),
            "webTech": (100, []),
        }
        assert result.analysis.job_match.percentage == 100
        assert result.analysis.job_match.matched_skills == 2
        assert result.analysis.job_match.total_skills == 2
        assert result.missing_skills == []

    def test_scenario_a_score_and_strengths(self):
        result = analyze(SCENARIO_A_RESUME, SCENARIO_A_JD)
        # 100 + 40 + 20 - 18 (six sections) - 12 (urls, bullets, length)
        assert result.score == 100
        assert result.strengths == [
            "Strong technical skill match with job requirements",
            "Excellent soft skills alignment",
            "Good use of quantifiable achievements",
        ]
        assert result.suggestions == ["Your resume is well-aligned with the job requirements"]

    def test_scenario_b(self):
        result = analyze(SCENARIO_B_RESUME, SCENARIO_B_JD)
        assert _breakdown(result) == {"cloud": (0, ["aws", "docker", "kubernetes"])}
        assert result.missing_skills == ["cloud: aws, docker, kubernetes"]
        assert result.analysis.job_match.percentage == 0
        assert result.analysis.job_match.total_skills == 3
        assert result.format_issues == [
            "Resume is too brief - add more detailed experience",
            "Use bullet points to better structure your experience",
            "Add missing sections: contact, summary, experience, education, skills, projects",
        ]
        assert result.suggestions == ["Strengthen cloud skills: aws, docker, kubernetes"]
        assert result.strengths == ["Good overall presentation"]
        # 100 + 0 + 20 (no soft skills required) - 18 - 20
        assert result.score == 82

    def test_full_resume(self, sample_resume, sample_jd):
        result = analyze(sample_resume, sample_jd)
        assert result.score == 100
        assert all(s.present for s in result.analysis.sections)
        assert result.format_issues == ["No major format issues found"]
        assert result.missing_skills == ["cloud: kubernetes", "concepts: agile"]
        assert result.suggestions == [
            "Strengthen cloud skills: kubernetes",
            "Strengthen concepts skills: agile",
        ]
        assert result.analysis.job_match.matched_skills == 9
        assert result.analysis.job_match.total_skills == 11
        assert result.analysis.job_match.percentage == 82


class TestProperties:
    @pytest.mark.parametrize(
        "resume,jd",
        [
            ("", ""),
            (SCENARIO_A_RESUME, SCENARIO_A_JD),
            (SCENARIO_B_RESUME, SCENARIO_B_JD),
            ("x" * 5000, "python java go aws docker leadership"),
        ],
    )
    def test_idempotent_and_bounded(self, resume, jd):
        first = analyze(resume, jd)
        assert first == analyze(resume, jd)
        assert 0 <= first.score <= 100

    def test_empty_inputs_do_not_fail(self):
        result = analyze("", "")
        assert result.analysis.skill_breakdown == []
        assert result.analysis.job_match.percentage == 0
        assert result.missing_skills == []
        assert result.strengths == ["Good overall presentation"]

    def test_no_recognized_keywords_gives_full_technical_credit(self):
        # Same resume, one JD with no keywords and one fully matched: equal scores
        resume = "Python"
        unrecognized = analyze(resume, "We want a friendly person")
        matched = analyze(resume, "We want a friendly person who knows Python")
        assert unrecognized.analysis.job_match.total_skills == 0
        assert unrecognized.score == matched.score

    def test_missing_skills_agree_with_breakdown(self, sample_resume, sample_jd):
        for resume, jd in [
            (sample_resume, sample_jd),
            (SCENARIO_B_RESUME, SCENARIO_B_JD),
            ("Java and SQL", "Java, Python, SQL, MongoDB, Jest, Cypress, Agile, TDD"),
        ]:
            result = analyze(resume, jd)
            from_breakdown = [
                f"{b.category}: {', '.join(b.missing)}"
                for b in result.analysis.skill_breakdown
                if b.missing
            ]
            assert result.missing_skills == from_breakdown

    def test_sections_reported_in_order(self):
        result = analyze("Education: BS Computer Science", "python")
        presence = {s.name: s.present for s in result.analysis.sections}
        assert presence["education"] is True
        assert [s.name for s in result.analysis.sections] == [
            "contact", "summary", "experience", "education", "skills", "projects",
        ]

    def test_serializes_with_camel_case_keys(self):
        data = analyze(SCENARIO_B_RESUME, SCENARIO_B_JD).model_dump(by_alias=True)
        assert set(data) == {
            "score", "analysis", "missingSkills", "strengths", "suggestions", "formatIssues",
        }
        assert set(data["analysis"]) == {"sections", "jobMatch", "skillBreakdown"}
        assert set(data["analysis"]["jobMatch"]) == {"percentage", "matchedSkills", "totalSkills"}
        assert set(data["analysis"]["skillBreakdown"][0]) == {"category", "match", "missing"}
