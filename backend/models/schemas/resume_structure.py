"""Section detector and content quality analyzer output."""

from pydantic import BaseModel, ConfigDict

QUALITY_CHECKS = (
    "has_quantifiable_results",
    "has_action_verbs",
    "has_urls",
    "has_bullet_points",
    "has_proper_length",
)


class SectionPresence(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    present: bool


class SectionAnalysis(BaseModel):
    model_config = ConfigDict(frozen=True)

    sections: tuple[SectionPresence, ...] = ()

    @property
    def missing_sections(self) -> list[str]:
        return [s.name for s in self.sections if not s.present]


class ContentQuality(BaseModel):
    """Pattern checks over the raw resume text.

    `length` is kept alongside the five checks so that a failed length check
    can be reported as either too brief or too long.
    """
    model_config = ConfigDict(frozen=True)

    has_quantifiable_results: bool = False
    has_action_verbs: bool = False
    has_urls: bool = False
    has_bullet_points: bool = False
    has_proper_length: bool = False
    length: int = 0

    @property
    def failed_checks(self) -> int:
        return sum(1 for check in QUALITY_CHECKS if not getattr(self, check))
