from dataclasses import dataclass, field
from enum import Enum


class AlertLevel(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


@dataclass(frozen=True)
class Alert:
    """A single finding attached to a section."""

    message: str
    level: AlertLevel
    category: str


@dataclass(frozen=True)
class SectionSpec:
    """One clause category of the fixed analysis catalog."""

    title: str
    key: str
    description: str


@dataclass(frozen=True)
class SectionAnalysis:
    """Outcome of analyzing one clause category. ``alerts`` is never empty."""

    title: str
    key: str
    content: str
    alerts: list[Alert] = field(default_factory=list)
    confidence: int = 0
    has_content: bool = False


def no_issues_alert(spec: SectionSpec) -> Alert:
    return Alert(
        message=f"No critical issues found in {spec.title.lower()}.",
        level=AlertLevel.INFO,
        category=spec.key,
    )
