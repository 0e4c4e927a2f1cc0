"""Shared test fixtures."""

import pytest

from api.router import limiter

SAMPLE_RESUME = """Jane Doe
Email: jane.doe@example.com | Phone: (555) 123-4567 | https://github.com/janedoe

Summary
Backend engineer with 6 years of experience building Python services.

Experience
Senior Engineer, Acme Corp (2019 - Present)
- Led a team of 4 engineers delivering a payments platform
- Developed REST API services in Python and Django
- Improved query latency by 35% with PostgreSQL indexing
- Implemented CI/CD pipelines with Jenkins and Docker
- Mentored junior developers and documented onboarding

Education
B.S. Computer Science, State University

Skills
Python, Django, PostgreSQL, Docker, AWS, Git, pytest

Projects
Open-source contributor to a Flask plugin ecosystem
"""

SAMPLE_JD = """Senior Python Developer
We need strong Python and Django skills, PostgreSQL, Docker and Kubernetes on AWS.
Experience with CI/CD, REST API design and agile teams. Leadership and communication expected.
"""


@pytest.fixture
def sample_resume() -> str:
    return SAMPLE_RESUME


@pytest.fixture
def sample_jd() -> str:
    return SAMPLE_JD


@pytest.fixture(autouse=True)
def _disable_rate_limit():
    """Keep the per-IP limit from tripping across API tests."""
    limiter.enabled = False
    yield
    limiter.enabled = True
