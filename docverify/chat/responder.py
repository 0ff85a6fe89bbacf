import re

from docverify.fields.models import DocumentRecord
from docverify.generation.client_base import BaseGenerationClient
from docverify.generation.models import GenerationParams
from docverify.logging.logger import Log

CHAT_PARAMS = GenerationParams(max_tokens=400, temperature=0.7, top_p=0.9)
CONTEXT_TEXT_LIMIT = 1000
LONG_TEXT_THRESHOLD = 100

PAYMENT_WORDS = ("payment", "amount", "price")
TERMINATION_WORDS = ("termination", "end", "expire")
RISK_WORDS = ("risk", "liability", "penalty")

_SENTENCE_END = re.compile(r"[.!?]")


def _mentions(text: str, words: tuple[str, ...]) -> bool:
    return any(word in text for word in words)


def _or(value: str, default: str) -> str:
    return value.strip() or default


def build_context(record: DocumentRecord | None, text: str) -> str:
    context = (
        "You are a helpful document analysis assistant. Based on the following document "
        "information, answer the user's question accurately and helpfully.\n\n"
    )
    if record is not None:
        context += (
            "Document Information:\n"
            f"- Document Type: {_or(record.document_type, 'Unknown')}\n"
            f"- Owner: {_or(record.owner, 'Unknown')}\n"
            f"- Survey Number: {_or(record.survey_number, 'Unknown')}\n"
            f"- Area: {_or(record.area, 'Unknown')}\n"
            f"- Location: {_or(record.district, 'Unknown')}, "
            f"{_or(record.taluk, 'Unknown')}, {_or(record.village, 'Unknown')}\n"
            f"- Classification: {_or(record.classification, 'Unknown')}\n"
            f"- Ownership Type: {_or(record.ownership_type, 'Unknown')}\n\n"
        )
    if text:
        context += f"Document Content:\n{text[:CONTEXT_TEXT_LIMIT]}...\n\n"
    return context


class ChatResponder:
    """Answers free-form questions about one parsed document.

    ``respond`` never raises and never returns an empty string. A configured
    generation client is asked first; any failure or empty reply falls
    through to keyword templates filled from the record.
    """

    def __init__(
        self,
        client: BaseGenerationClient | None = None,
        params: GenerationParams = CHAT_PARAMS,
    ) -> None:
        self._client = client
        self._params = params

    def respond(
        self,
        question: str,
        record: DocumentRecord | None = None,
        text: str | None = None,
    ) -> str:
        text = text or ""
        if self._client is not None:
            reply = self._ask_service(question, record, text)
            if reply:
                return reply
        return self.template_reply(question, record or DocumentRecord(), text)

    def _ask_service(self, question: str, record: DocumentRecord | None, text: str) -> str:
        prompt = (
            f"{build_context(record, text)}"
            f"User Question: {question}\n\n"
            "Please provide a comprehensive answer based on the document content:"
        )
        try:
            return self._client.generate(prompt, self._params).text.strip()
        except Exception as exc:  # noqa: BLE001
            Log.warning(f"Chat generation failed, using template reply: {exc}")
            return ""

    def template_reply(self, question: str, record: DocumentRecord, text: str) -> str:
        question_lower = (question or "").lower()
        text_lower = text.lower()
        document_type = _or(record.document_type, "document")
        survey = _or(record.survey_number, "the specified survey number")
        area = _or(record.area, "the specified area")
        district = _or(record.district, "the district")
        location = (
            f"{_or(record.district, 'Unknown')}, {_or(record.taluk, 'Unknown')}, "
            f"{_or(record.village, 'Unknown')}"
        )

        replies = {
            "key terms": (
                "Based on the document analysis, here are the key terms:\n"
                f"• Document Type: {_or(record.document_type, 'Unknown')}\n"
                f"• Owner: {_or(record.owner, 'Unknown')}\n"
                f"• Survey Number: {_or(record.survey_number, 'Unknown')}\n"
                f"• Area: {_or(record.area, 'Unknown')}\n"
                f"• Location: {location}"
            ),
            "payment": (
                "The document contains payment terms that should be reviewed carefully. "
                "Please check the specific amounts, schedules, and conditions mentioned in "
                "the document."
                if _mentions(text_lower, PAYMENT_WORDS)
                else "Payment terms are not clearly defined in this document. This is an "
                "important area that needs attention and clarification."
            ),
            "termination": (
                "The document includes termination conditions that should be carefully "
                "reviewed. Please examine the specific terms and notice periods mentioned."
                if _mentions(text_lower, TERMINATION_WORDS)
                else "Termination conditions are not clearly defined in this document. This "
                "is a critical area that requires clarification."
            ),
            "risks": (
                "The document mentions several risk factors and liability considerations. "
                "Please review these carefully to understand your obligations and protections."
                if _mentions(text_lower, RISK_WORDS)
                else "Risk factors and liability terms are not clearly outlined in this "
                "document. This is an important area that needs attention."
            ),
            "obligations": (
                "The document outlines various obligations for both parties. Key obligations "
                "include proper documentation, timely payments, and compliance with local "
                "regulations."
            ),
            "survey": (
                "The survey number mentioned in this document is: "
                f"{_or(record.survey_number, 'Not specified')}"
            ),
            "area": f"The land area covered in this document is: {_or(record.area, 'Not specified')}",
            "owner": f"The owner mentioned in this document is: {_or(record.owner, 'Not specified')}",
            "location": f"The property is located in: {location}",
            "property": (
                f"Based on the document, this property is located at {survey} covering {area} "
                f"in {district}."
            ),
            "description": (
                f"The document describes a {_or(record.document_type, 'property')} with the "
                f"following details: Survey Number: {_or(record.survey_number, 'Not specified')}, "
                f"Area: {_or(record.area, 'Not specified')}, "
                f"Owner: {_or(record.owner, 'Not specified')}."
            ),
            "dispute": (
                f"Based on my analysis of your {document_type}, the dispute resolution "
                "procedures may need attention. I recommend ensuring clear mechanisms are in "
                "place for handling conflicts."
            ),
            "confidentiality": (
                f"From my analysis of your {document_type}, confidentiality terms should be "
                "clearly defined. This is important for protecting sensitive information and "
                "trade secrets."
            ),
            "legal": (
                f"Based on my analysis of your {document_type}, there are several legal "
                "implications to consider. I recommend consulting with a legal professional to "
                "ensure full compliance and protection."
            ),
            "compliance": (
                f"From my analysis of your {document_type}, compliance requirements should be "
                "clearly outlined. This includes regulatory adherence and reporting obligations."
            ),
        }
        for keyword, reply in replies.items():
            if keyword in question_lower:
                return reply

        opening = (
            f"Based on the document analysis, I can see this is a {document_type} for "
            f"{_or(record.owner, 'the owner')}."
        )
        closing = (
            f"The property is located at {survey} covering {area} in {district}. "
            "Please ask me specific questions about terms, risks, or obligations for more "
            "detailed information."
        )
        if len(text) > LONG_TEXT_THRESHOLD:
            first_sentence = _SENTENCE_END.split(text, maxsplit=1)[0]
            return f'{opening} The document begins with: "{first_sentence}..." {closing}'
        return f"{opening} {closing}"
