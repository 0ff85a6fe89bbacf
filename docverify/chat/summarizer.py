"""Contract summary and key points.

Both operations try the generation client first and fall back to local
heuristics, so they always return something usable.
"""

import re

from docverify.fields.extractor import TAMIL_NADU_DISTRICTS
from docverify.fields.rules import RuleChain, captured, keyword_table, literal
from docverify.generation.client_base import BaseGenerationClient
from docverify.generation.models import GenerationParams
from docverify.logging.logger import Log

SUMMARY_UNAVAILABLE = "Document summary not available. Please review the document content manually."
NO_KEY_POINTS = "No key points available."
KEY_POINT_FILLER = "Document contains Tamil Nadu land ownership and property information."

MIN_SUMMARY_TEXT_LENGTH = 50
SUMMARY_SENTENCES = 3
MIN_KEY_POINTS = 3
MAX_KEY_POINTS = 5
PROMPT_TEXT_LIMIT = 2000

SUMMARY_PARAMS = GenerationParams(max_tokens=200, temperature=0.5, top_p=0.9)
KEY_POINTS_PARAMS = GenerationParams(max_tokens=300, temperature=0.6, top_p=0.9)

_SENTENCE_SPLIT = re.compile(r"(?<=\.)\s+")
_CLAUSE_PUNCTUATION = re.compile(r"[;:,]")
_DOMAIN_KEYWORDS = re.compile(
    r"(agree|shall|must|owner|survey|area|district|village|taluk|document|contract|payment|date)",
    re.IGNORECASE,
)
_BULLET_SPLIT = re.compile(r"[•\-*]")


def _first_words(value: str, count: int = 3) -> str:
    return " ".join(value.split()[:count])


def _first_word(value: str) -> str:
    words = value.split()
    return words[0].title() if words else ""


DOCUMENT_KIND_CHAIN = RuleChain(
    "documentKind",
    keyword_table(
        [
            (r"\bpatta\b", "Patta Document (ownership record)"),
            (r"\bchitta\b", "Chitta Record (land classification)"),
            (r"\ba[- ]register\b", "A-Register Extract (village accountant record)"),
            (r"\bfmb\b|field measurement", "Field Measurement Book (survey details)"),
            (r"title deed", "Title Deed (ownership document)"),
            (r"sale deed", "Sale Deed (property transfer)"),
            (r"gift deed", "Gift Deed (property gift transfer)"),
        ]
    ),
)

OWNER_POINT_CHAIN = RuleChain(
    "ownerPoint",
    (
        captured(r"\bowner[:\s]+([a-zA-Z .]+)", lambda v: f"Land is owned by {_first_words(v)}"),
        captured(r"\bpattadhar[:\s]+([a-zA-Z .]+)", lambda v: f"Land is owned by {_first_words(v)}"),
        captured(
            r"\b(?:shri|sri|mr|mrs|ms)\.?\s+([a-zA-Z .]+)",
            lambda v: f"Land is owned by {_first_words(v)}",
        ),
        captured(
            r"\b(?:s/o|d/o|w/o)\s+([a-zA-Z .]+)",
            lambda v: f"Property owner information includes {v.strip()}",
        ),
    ),
)

SURVEY_POINT_CHAIN = RuleChain(
    "surveyPoint",
    (captured(r"\b(?:sf|survey)\s*no\.?\s*[:\-]?\s*(\d+/?\d*-?\d*)", lambda v: f"Survey No. {v}"),),
)

AREA_POINT_CHAIN = RuleChain(
    "areaPoint",
    (
        captured(
            r"(\d+\.?\d*\s*(?:acres?|hectares?|cents?))\b",
            lambda v: f"Area: {' '.join(v.split())}",
        ),
    ),
)

CLASSIFICATION_POINT_CHAIN = RuleChain(
    "classificationPoint",
    keyword_table(
        [
            (rf"\b{kind}\b", f"Classification: {kind} land")
            for kind in ("wet", "dry", "irrigated", "garden", "residential", "commercial")
        ]
    ),
)

DISTRICT_POINT_CHAIN = RuleChain(
    "districtPoint",
    keyword_table([(rf"\b{name}\b", f"District: {name.title()}") for name in TAMIL_NADU_DISTRICTS]),
)

TALUK_POINT_CHAIN = RuleChain(
    "talukPoint",
    (captured(r"\btaluk[:\s]+([a-zA-Z]+)", lambda v: f"Taluk: {_first_word(v)}"),),
)

VILLAGE_POINT_CHAIN = RuleChain(
    "villagePoint",
    (captured(r"\bvillage[:\s]+([a-zA-Z]+)", lambda v: f"Village: {_first_word(v)}"),),
)

LEGAL_STATUS_CHAIN = RuleChain(
    "legalStatus",
    (
        literal(r"\bregistered\b", "Document appears to be registered"),
        literal(r"\blegal\b|\bvalid\b", "Document indicates legal validity"),
        literal(r"\bpatta\b|\btitle\b", "Document establishes ownership rights"),
    ),
)

ADDITIONAL_INFO_CHAIN = RuleChain(
    "additionalInfo",
    (
        captured(r"(\d{1,2}[-/]\d{1,2}[-/]\d{4})", lambda v: f"Document date: {v}"),
        captured(
            r"\breg(?:istration)?\s*no\.?\s*[:\-]?\s*([a-zA-Z0-9/\-]+)",
            lambda v: f"Registration number: {v}",
        ),
        literal(
            r"\bboundary\b|\badjacent\b|\bborder\b",
            "Document contains boundary and adjacent property details",
        ),
    ),
)


def extractive_summary(text: str) -> str:
    """Keep the highest-scoring sentences in their original order."""
    collapsed = " ".join(text.split())
    sentences = [s.strip() for s in _SENTENCE_SPLIT.split(collapsed) if s.strip()]
    if not sentences:
        return SUMMARY_UNAVAILABLE
    ranked = sorted(
        enumerate(sentences), key=lambda item: (-_score_sentence(item[1]), item[0])
    )[:SUMMARY_SENTENCES]
    return " ".join(sentence for _, sentence in sorted(ranked))


def _score_sentence(sentence: str) -> int:
    score = 0
    if len(sentence) > 80:
        score += 2
    if _CLAUSE_PUNCTUATION.search(sentence):
        score += 1
    if _DOMAIN_KEYWORDS.search(sentence):
        score += 2
    return score


def rule_based_key_points(text: str) -> list[str]:
    """Land-record key points found by pattern rules, padded to at least three."""
    if not text or not text.strip():
        return [NO_KEY_POINTS]

    points: list[str] = []

    kind = DOCUMENT_KIND_CHAIN.first_match(text, default="")
    if kind:
        points.append(f"Document Type: This is a {kind} from Tamil Nadu land records.")

    owner = OWNER_POINT_CHAIN.first_match(text, default="")
    if owner:
        points.append(f"Land Ownership: {owner}")

    property_details = _joined(
        text, (SURVEY_POINT_CHAIN, AREA_POINT_CHAIN, CLASSIFICATION_POINT_CHAIN)
    )
    if property_details:
        points.append(f"Property Information: {property_details}")

    location = _joined(text, (DISTRICT_POINT_CHAIN, TALUK_POINT_CHAIN, VILLAGE_POINT_CHAIN))
    if location:
        points.append(f"Location Details: Located in {location}")

    legal_status = LEGAL_STATUS_CHAIN.first_match(text, default="")
    if legal_status:
        points.append(f"Legal Status: {legal_status}")

    additional = ADDITIONAL_INFO_CHAIN.first_match(text, default="")
    if additional and len(points) < MAX_KEY_POINTS:
        points.append(f"Additional Information: {additional}")

    while len(points) < MIN_KEY_POINTS:
        points.append(KEY_POINT_FILLER)
    return points[:MAX_KEY_POINTS]


def _joined(text: str, chains: tuple[RuleChain, ...]) -> str:
    found = (chain.first_match(text, default="") for chain in chains)
    return ", ".join(value for value in found if value)


class Summarizer:
    """Produces the summary and key points stored with a contract analysis."""

    def __init__(self, client: BaseGenerationClient | None = None) -> None:
        self._client = client

    def summarize(self, text: str | None) -> str:
        if not text or len(text.strip()) < MIN_SUMMARY_TEXT_LENGTH:
            return SUMMARY_UNAVAILABLE
        generated = self._generate(
            "Please provide a concise summary of the following document in 2-3 sentences: "
            f"{text[:PROMPT_TEXT_LIMIT]}",
            SUMMARY_PARAMS,
        )
        return generated or extractive_summary(text)

    def key_points(self, text: str | None) -> list[str]:
        if not text or not text.strip():
            return [NO_KEY_POINTS]
        generated = self._generate(
            "Extract 5 key points from the following document. "
            f"Each point should be a complete sentence: {text[:PROMPT_TEXT_LIMIT]}",
            KEY_POINTS_PARAMS,
        )
        if generated:
            points = [p.strip() for p in _BULLET_SPLIT.split(generated) if len(p.strip()) > 10]
            if len(points) >= MIN_KEY_POINTS:
                return points[:MAX_KEY_POINTS]
        return rule_based_key_points(text)

    def _generate(self, prompt: str, params: GenerationParams) -> str:
        if self._client is None:
            return ""
        try:
            return self._client.generate(prompt, params).text.strip()
        except Exception as exc:  # noqa: BLE001
            Log.warning(f"Generation failed, using local heuristics: {exc}")
            return ""
