"""Parser for the CONTENT / ALERTS / CONFIDENCE / HAS_CONTENT reply grammar."""

import re

from docverify.sections.exceptions import SectionParseError
from docverify.sections.models import (
    Alert,
    AlertLevel,
    SectionAnalysis,
    SectionSpec,
    no_issues_alert,
)

CONFIDENCE_SCORES: dict[str, int] = {"high": 90, "medium": 60, "low": 30}
DEFAULT_CONFIDENCE = 60
NO_ISSUES_PHRASE = "no critical issues found"

_PREFIX_RE = re.compile(r"^(CONTENT|ALERTS|CONFIDENCE|HAS_CONTENT)\s*:\s*(.*)$", re.IGNORECASE)
_BULLET_RE = re.compile(r"^(?:[-*•]|\d+[.)])\s*")


def parse_section_reply(reply: str, spec: SectionSpec) -> SectionAnalysis:
    """Parse a generated reply into a SectionAnalysis.

    Lines following a recognized prefix accumulate into the open block
    (content or alerts) until the next prefix. CONFIDENCE and HAS_CONTENT
    close the open block.

    Raises:
        SectionParseError: if the reply has no CONTENT block or it is empty.
    """
    content_parts: list[str] = []
    alerts: list[Alert] = []
    confidence_word = "medium"
    has_content = False
    found_content = False
    block: str | None = None

    for line in (raw.strip() for raw in reply.splitlines()):
        if not line:
            continue
        match = _PREFIX_RE.match(line)
        if match is not None:
            prefix, rest = match.group(1).upper(), match.group(2).strip()
            if prefix == "CONTENT":
                block = "content"
                found_content = True
                if rest:
                    content_parts.append(rest)
            elif prefix == "ALERTS":
                block = "alerts"
                _add_alert(alerts, rest, spec)
            elif prefix == "CONFIDENCE":
                block = None
                confidence_word = rest
            else:
                block = None
                has_content = rest.lower().startswith("yes")
        elif block == "content":
            content_parts.append(line)
        elif block == "alerts":
            _add_alert(alerts, line, spec)

    content = " ".join(content_parts).strip()
    if not found_content or not content:
        raise SectionParseError(f"No CONTENT block in reply for {spec.title}")

    return SectionAnalysis(
        title=spec.title,
        key=spec.key,
        content=content,
        alerts=alerts or [no_issues_alert(spec)],
        confidence=confidence_score(confidence_word),
        has_content=has_content,
    )


def confidence_score(word: str) -> int:
    """Map a High/Medium/Low confidence word to its score."""
    match = re.match(r"[a-z]+", word.strip().lower())
    if match is None:
        return DEFAULT_CONFIDENCE
    return CONFIDENCE_SCORES.get(match.group(0), DEFAULT_CONFIDENCE)


def _add_alert(alerts: list[Alert], line: str, spec: SectionSpec) -> None:
    message = _BULLET_RE.sub("", line).strip()
    if not message or NO_ISSUES_PHRASE in message.lower():
        return
    alerts.append(Alert(message=message, level=AlertLevel.WARNING, category=spec.key))
