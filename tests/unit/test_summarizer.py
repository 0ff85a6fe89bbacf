from unittest.mock import MagicMock

import pytest

from docverify.chat.summarizer import (
    KEY_POINT_FILLER,
    KEY_POINTS_PARAMS,
    NO_KEY_POINTS,
    SUMMARY_PARAMS,
    SUMMARY_UNAVAILABLE,
    Summarizer,
    extractive_summary,
    rule_based_key_points,
)
from docverify.generation.client_base import BaseGenerationClient
from docverify.generation.exceptions import GenerationNetworkError
from docverify.generation.models import GenerationResult

LEASE_TEXT = (
    "Hello there.\n"
    "The tenant shall pay rent on the first day of each month, without any deduction "
    "or delay whatsoever.\n"
    "This contract is governed by local law. Nothing else. Payment is due monthly."
)


def _client(text: str = "", error: Exception | None = None) -> MagicMock:
    client = MagicMock(spec=BaseGenerationClient)
    if error is not None:
        client.generate.side_effect = error
    else:
        client.generate.return_value = GenerationResult(text=text)
    return client


class TestExtractiveSummary:
    def test_keeps_top_three_in_original_order(self) -> None:
        assert extractive_summary(LEASE_TEXT) == (
            "The tenant shall pay rent on the first day of each month, without any deduction "
            "or delay whatsoever. This contract is governed by local law. Payment is due monthly."
        )

    def test_short_text_is_kept_whole(self) -> None:
        assert extractive_summary("Only one sentence here.") == "Only one sentence here."


class TestRuleBasedKeyPoints:
    def test_land_document(self, land_text: str) -> None:
        points = rule_based_key_points(land_text)
        assert points == [
            "Document Type: This is a Patta Document (ownership record) from Tamil Nadu land records.",
            "Land Ownership: Land is owned by RamKumar",
            "Property Information: Survey No. 312/4, Area: 2.5 acres, Classification: dry land",
            "Location Details: Located in District: Chennai, Taluk: Tambaram, "
            "Village: Perungalathur",
            "Legal Status: Document establishes ownership rights",
        ]

    def test_padded_to_three(self) -> None:
        points = rule_based_key_points("Registered on 12/03/2020 for the buyer.")
        assert points == [
            "Legal Status: Document appears to be registered",
            "Additional Information: Document date: 12/03/2020",
            KEY_POINT_FILLER,
        ]

    def test_empty_text(self) -> None:
        assert rule_based_key_points("   ") == [NO_KEY_POINTS]


class TestSummarize:
    @pytest.mark.parametrize("text", [None, "", "too short to summarize"])
    def test_short_or_missing_text(self, text: str | None) -> None:
        assert Summarizer(_client("ignored")).summarize(text) == SUMMARY_UNAVAILABLE

    def test_uses_generation_client(self) -> None:
        client = _client("  A lease between two parties.  ")
        assert Summarizer(client).summarize(LEASE_TEXT) == "A lease between two parties."
        prompt, params = client.generate.call_args[0]
        assert prompt.startswith("Please provide a concise summary")
        assert params == SUMMARY_PARAMS

    def test_falls_back_on_client_error(self) -> None:
        client = _client(error=GenerationNetworkError("down"))
        assert Summarizer(client).summarize(LEASE_TEXT) == extractive_summary(LEASE_TEXT)

    def test_falls_back_on_empty_reply(self) -> None:
        assert Summarizer(_client("   ")).summarize(LEASE_TEXT) == extractive_summary(LEASE_TEXT)

    def test_without_client(self) -> None:
        assert Summarizer().summarize(LEASE_TEXT) == extractive_summary(LEASE_TEXT)


class TestKeyPoints:
    def test_splits_bulleted_reply(self, land_text: str) -> None:
        client = _client(
            "• The land is a patta record\n"
            "• The owner is RamKumar\n"
            "• The extent is two and a half acres\n"
            "• ok"
        )
        points = Summarizer(client).key_points(land_text)
        assert points == [
            "The land is a patta record",
            "The owner is RamKumar",
            "The extent is two and a half acres",
        ]
        assert client.generate.call_args[0][1] == KEY_POINTS_PARAMS

    def test_caps_at_five(self, land_text: str) -> None:
        reply = "\n".join(f"* Generated key point number {i}" for i in range(8))
        assert len(Summarizer(_client(reply)).key_points(land_text)) == 5

    def test_too_few_generated_points_fall_back(self, land_text: str) -> None:
        points = Summarizer(_client("• Only one useful point")).key_points(land_text)
        assert points == rule_based_key_points(land_text)

    def test_empty_text(self) -> None:
        assert Summarizer(_client("unused")).key_points(None) == [NO_KEY_POINTS]
