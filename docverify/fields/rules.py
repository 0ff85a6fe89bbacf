"""Ordered first-match rule chains for field extraction."""

import re
from collections.abc import Callable
from dataclasses import dataclass

from docverify.fields.models import UNKNOWN

Extractor = Callable[[re.Match[str]], str]


@dataclass(frozen=True)
class FieldRule:
    """A compiled pattern plus the function that turns its match into a value."""

    pattern: re.Pattern[str]
    extract: Extractor

    def apply(self, text: str) -> str | None:
        match = self.pattern.search(text)
        if match is None:
            return None
        value = self.extract(match).strip()
        return value or None


@dataclass(frozen=True)
class RuleChain:
    """Rules for one field, tried in priority order. The first non-empty value wins."""

    field_name: str
    rules: tuple[FieldRule, ...]

    def first_match(self, text: str, default: str = UNKNOWN) -> str:
        for rule in self.rules:
            value = rule.apply(text)
            if value is not None:
                return value
        return default


def literal(pattern: str, value: str) -> FieldRule:
    """Rule that yields a fixed value whenever ``pattern`` is found."""
    return FieldRule(re.compile(pattern, re.IGNORECASE), lambda _match: value)


def captured(
    pattern: str,
    transform: Callable[[str], str] = str.strip,
    group: int = 1,
) -> FieldRule:
    """Rule that yields ``transform`` applied to a captured group."""
    return FieldRule(
        re.compile(pattern, re.IGNORECASE),
        lambda match: transform(match.group(group) or ""),
    )


def keyword_table(table: list[tuple[str, str]]) -> tuple[FieldRule, ...]:
    """Rules for a (pattern, value) table, preserving table order."""
    return tuple(literal(pattern, value) for pattern, value in table)
