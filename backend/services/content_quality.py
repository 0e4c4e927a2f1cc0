import re

from models.schemas.resume_structure import ContentQuality

# Percentages, dollar amounts, year counts or any bare number; ASCII digits only
_QUANTIFIED_RE = re.compile(r"\d+%|\$\d+|\d+ years|\d+\+?", re.ASCII)

_ACTION_VERBS_RE = re.compile(
    r"\b(led|developed|created|implemented|managed|designed|improved)\b",
    re.ASCII | re.IGNORECASE,
)

# Whitespace stays Unicode-aware, like the browser's \s
_URL_RE = re.compile(r"https?://[^\s]+")

_BULLET_RE = re.compile(r"[•·-]\s")

MIN_BULLETS = 5
MIN_LENGTH = 300
MAX_LENGTH = 2000


def text_length(text: str) -> int:
    """Length in UTF-16 code units, so astral characters such as emoji count twice."""
    return len(text.encode("utf-16-le", errors="surrogatepass")) // 2


def count_bullets(text: str) -> int:
    """Count bullet-like prefixes ('•', '·' or '-' followed by whitespace)."""
    return len(_BULLET_RE.findall(text))


def analyze_content(resume_text: str) -> ContentQuality:
    """Run the pattern checks on the original-case resume text."""
    length = text_length(resume_text)
    return ContentQuality(
        has_quantifiable_results=bool(_QUANTIFIED_RE.search(resume_text)),
        has_action_verbs=bool(_ACTION_VERBS_RE.search(resume_text)),
        has_urls=bool(_URL_RE.search(resume_text)),
        has_bullet_points=count_bullets(resume_text) >= MIN_BULLETS,
        has_proper_length=MIN_LENGTH <= length <= MAX_LENGTH,
        length=length,
    )
