from docverify.fields.models import UNKNOWN
from docverify.fields.rules import RuleChain, captured, keyword_table, literal


class TestFieldRule:
    def test_literal_yields_fixed_value(self) -> None:
        rule = literal(r"\bpatta\b", "Patta")
        assert rule.apply("This PATTA is issued") == "Patta"

    def test_literal_no_match(self) -> None:
        assert literal(r"\bpatta\b", "Patta").apply("pattadhar only") is None

    def test_captured_applies_transform(self) -> None:
        rule = captured(r"village[:\s]+([a-z]+)", str.title)
        assert rule.apply("Village: perungalathur") == "Perungalathur"

    def test_blank_capture_counts_as_no_match(self) -> None:
        rule = captured(r"owner:(\s*)")
        assert rule.apply("owner:   ") is None


class TestRuleChain:
    def test_first_rule_wins(self) -> None:
        chain = RuleChain("kind", keyword_table([(r"patta", "Patta"), (r"chitta", "Chitta")]))
        assert chain.first_match("chitta and patta") == "Patta"

    def test_falls_through_to_later_rules(self) -> None:
        chain = RuleChain(
            "district",
            (literal(r"chennai", "Chennai"), captured(r"district[:\s]+([a-z]+)", str.title)),
        )
        assert chain.first_match("District: salem") == "Salem"

    def test_default_when_nothing_matches(self) -> None:
        chain = RuleChain("taluk", (captured(r"taluk[:\s]+([a-z]+)"),))
        assert chain.first_match("no location") == UNKNOWN
        assert chain.first_match("no location", default="") == ""
