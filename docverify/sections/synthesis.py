import random
from collections.abc import Sequence

from docverify.sections.base import BaseSectionAnalyzer
from docverify.sections.catalog import SECTION_CATALOG
from docverify.sections.models import (
    Alert,
    AlertLevel,
    SectionAnalysis,
    SectionSpec,
    no_issues_alert,
)
from docverify.sections.templates import (
    ISSUE_ALERTS,
    ISSUE_TEMPLATES,
    SUCCESS_ALERTS,
    SUCCESS_TEMPLATES,
)

DEFAULT_SUCCESS_CONFIDENCES: tuple[int, ...] = (85, 88, 90, 92, 95)
DEFAULT_ISSUE_CONFIDENCES: tuple[int, ...] = (25, 30, 35, 40, 45)
MINOR_ALERT_PROBABILITY = 0.2
ISSUE_HAS_CONTENT_PROBABILITY = 0.8


class DeterministicSynthesisSectionAnalyzer(BaseSectionAnalyzer):
    """Synthesizes varied section outcomes from fixed template pools.

    Each section is drawn as a success with probability ``success_ratio``.
    Pass ``seed`` for reproducible output.
    """

    def __init__(
        self,
        *,
        success_ratio: float = 0.7,
        success_confidences: Sequence[int] = DEFAULT_SUCCESS_CONFIDENCES,
        issue_confidences: Sequence[int] = DEFAULT_ISSUE_CONFIDENCES,
        seed: int | None = None,
        catalog: Sequence[SectionSpec] = SECTION_CATALOG,
    ) -> None:
        super().__init__(catalog)
        if not 0.0 <= success_ratio <= 1.0:
            raise ValueError(f"success_ratio must be within [0, 1], got {success_ratio}")
        self._success_ratio = success_ratio
        self._success_confidences = _validated_buckets(success_confidences)
        self._issue_confidences = _validated_buckets(issue_confidences)
        self._rng = random.Random(seed)

    def _analyze_section(
        self, spec: SectionSpec, text: str, document_type: str
    ) -> SectionAnalysis:
        if self._rng.random() < self._success_ratio:
            return self._success_section(spec)
        return self._issue_section(spec)

    def _success_section(self, spec: SectionSpec) -> SectionAnalysis:
        confidence = self._rng.choice(self._success_confidences)
        content = self._rng.choice(SUCCESS_TEMPLATES.get(spec.key, SUCCESS_TEMPLATES["payment"]))
        alerts: list[Alert] = []
        if self._rng.random() < MINOR_ALERT_PROBABILITY:
            alerts.append(_render_alert(self._rng.choice(SUCCESS_ALERTS), spec))
        return SectionAnalysis(
            title=spec.title,
            key=spec.key,
            content=content,
            alerts=alerts or [no_issues_alert(spec)],
            confidence=confidence,
            has_content=True,
        )

    def _issue_section(self, spec: SectionSpec) -> SectionAnalysis:
        confidence = self._rng.choice(self._issue_confidences)
        content = self._rng.choice(ISSUE_TEMPLATES.get(spec.key, ISSUE_TEMPLATES["payment"]))
        picked = self._rng.sample(ISSUE_ALERTS, self._rng.randint(1, 2))
        return SectionAnalysis(
            title=spec.title,
            key=spec.key,
            content=content,
            alerts=[_render_alert(template, spec) for template in picked],
            confidence=confidence,
            has_content=self._rng.random() < ISSUE_HAS_CONTENT_PROBABILITY,
        )


def _render_alert(template: tuple[str, str], spec: SectionSpec) -> Alert:
    message, level = template
    return Alert(
        message=message.format(title=spec.title, title_lower=spec.title.lower()),
        level=AlertLevel(level),
        category=spec.key,
    )


def _validated_buckets(values: Sequence[int]) -> tuple[int, ...]:
    buckets = tuple(int(value) for value in values)
    if not buckets:
        raise ValueError("confidence buckets must not be empty")
    if any(value < 0 or value > 100 for value in buckets):
        raise ValueError(f"confidence buckets must be within [0, 100], got {buckets}")
    return buckets
