import io

import pytest
from docx import Document as DocxDocument
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from docverify.fields.models import DocumentRecord
from docverify.verification.models import VerificationDetails, VerificationResult

LAND_TEXT = (
    "PATTA\n"
    "Owner: RamKumar\n"
    "Survey No. 312/4\n"
    "Extent: 2.5 acres\n"
    "District: Chennai\n"
    "Taluk: Tambaram\n"
    "Village: Perungalathur\n"
    "Classification: Dry land\n"
)


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Patta Owner: RamKumar Survey No. 312/4")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_docx_bytes() -> bytes:
    """Generate a Word document with one paragraph and a two-column table."""
    document = DocxDocument()
    document.add_paragraph("Sale agreement between the parties")
    table = document.add_table(rows=1, cols=2)
    table.rows[0].cells[0].text = "Survey No."
    table.rows[0].cells[1].text = "312/4"
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


@pytest.fixture()
def land_text() -> str:
    return LAND_TEXT


@pytest.fixture()
def land_record() -> DocumentRecord:
    return DocumentRecord(
        document_type="Patta",
        owner="RamKumar",
        survey_number="SF No. 312/4",
        area="2.5 acres",
        district="Chennai",
        taluk="Tambaram",
        village="Perungalathur",
        classification="Dry Land",
        ownership_type="Private",
        raw_text=LAND_TEXT,
    )


@pytest.fixture()
def passing_details() -> VerificationDetails:
    return VerificationDetails(
        registration_status="Registered",
        portal_match=True,
        ownership_verified=True,
        boundaries_confirmed=True,
        tax_status="Current",
    )


@pytest.fixture()
def verification_result(passing_details: VerificationDetails) -> VerificationResult:
    return VerificationResult(
        id="11111111-2222-3333-4444-555555555555",
        document_name="patta.pdf",
        upload_date="2026-10-18",
        status="Verified",
        is_legal=True,
        ownership_type="Private",
        document_type="Patta",
        survey_number="SF No. 312/4",
        district="Chennai",
        taluk="Tambaram",
        village="Perungalathur",
        area="2.5 acres",
        owner="RamKumar",
        classification="Dry Land",
        discrepancies=[],
        confidence=100,
        verification_details=passing_details,
    )
