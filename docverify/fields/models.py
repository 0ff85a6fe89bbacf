from dataclasses import dataclass

UNKNOWN = "Unknown"


@dataclass(frozen=True)
class DocumentRecord:
    """Structured facts parsed from one document's text.

    Every field is a non-empty string: a matched value or ``UNKNOWN``.
    """

    document_type: str = UNKNOWN
    owner: str = UNKNOWN
    survey_number: str = UNKNOWN
    area: str = UNKNOWN
    district: str = UNKNOWN
    taluk: str = UNKNOWN
    village: str = UNKNOWN
    classification: str = UNKNOWN
    ownership_type: str = UNKNOWN
    raw_text: str = UNKNOWN
