import io

import pytest
from PIL import Image, ImageDraw
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

LAB_REPORT_LINES = [
    "City Hospital Laboratory - Complete Blood Count",
    "Date: 2024-03-14    Doctor: Dr. Jane Smith",
    "Glucose 130 mg/dL (70-99) H",
    "Hemoglobin 13.5 g/dL (12.0-15.5)",
]


def _pdf_bytes(pages: list[list[str]]) -> bytes:
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    for lines in pages:
        y = 720
        for line in lines:
            c.drawString(72, y, line)
            y -= 18
        c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    return _pdf_bytes([["Hello PDF World"]])


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    return _pdf_bytes([["Page one content"], ["Page two content"]])


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    return _pdf_bytes([[]])


@pytest.fixture()
def lab_report_pdf_bytes() -> bytes:
    """Generate a PDF with enough lab report text to pass the readability threshold."""
    return _pdf_bytes([LAB_REPORT_LINES])


@pytest.fixture()
def sample_png_bytes() -> bytes:
    """Generate a small PNG with dark text-like marks on white."""
    image = Image.new("RGB", (400, 200), color="white")
    draw = ImageDraw.Draw(image)
    draw.text((20, 80), "Amoxicillin 500mg", fill="black")
    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()
