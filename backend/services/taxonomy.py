"""Keyword taxonomies used by the resume matcher.

All tables are read-only and ordered: iteration order drives the order of
categories in the breakdown and of keywords in every "missing" list.
"""

from types import MappingProxyType
from typing import Mapping

# ---------------------------------------------------------------------------
# Hard skills: a keyword is "required" when it appears in the job description
# ---------------------------------------------------------------------------
HARD_SKILLS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "programming": (
        "javascript", "python", "java", "c++", "ruby", "php", "swift", "kotlin", "go",
    ),
    "webTech": (
        "html", "css", "react", "angular", "vue", "node.js", "express", "django", "flask",
    ),
    "database": ("sql", "mongodb", "postgresql", "mysql", "redis", "elasticsearch"),
    "cloud": ("aws", "azure", "gcp", "docker", "kubernetes", "terraform"),
    "tools": ("git", "jenkins", "jira", "confluence", "bitbucket", "gitlab"),
    "testing": ("jest", "mocha", "selenium", "cypress", "junit", "pytest"),
    "concepts": (
        "agile", "scrum", "ci/cd", "tdd", "rest api", "microservices", "design patterns",
    ),
})

# ---------------------------------------------------------------------------
# Soft skills: matched per family, not per keyword
# ---------------------------------------------------------------------------
SOFT_SKILLS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "leadership": ("leadership", "managed", "led", "supervised", "mentored", "coordinated"),
    "communication": ("communication", "presented", "wrote", "documented", "collaborated"),
    "problemSolving": ("solved", "improved", "optimized", "debugged", "troubleshot"),
    "teamwork": ("team", "collaborated", "partnered", "cross-functional", "cooperation"),
    "projectManagement": ("delivered", "planned", "organized", "scheduled", "budgeted"),
})

# ---------------------------------------------------------------------------
# Resume sections and the keywords that signal them
# ---------------------------------------------------------------------------
SECTIONS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "contact": ("email", "phone", "linkedin", "location"),
    "summary": ("summary", "objective", "profile", "about"),
    "experience": ("experience", "work history", "employment"),
    "education": ("education", "degree", "university", "certification"),
    "skills": ("skills", "technologies", "competencies"),
    "projects": ("projects", "portfolio", "works"),
})
