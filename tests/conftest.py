"""Pytest configuration and fixtures."""

import io
import json
from types import SimpleNamespace
from typing import Generator

import pytest
from fastapi.testclient import TestClient
from pypdf import PdfWriter

from app.backend.main import app
from app.backend.models import ExtractedFields
from app.backend.services.ai import AIService
from app.backend.services.pdf_service import ExtractedText, PDFService
from app.backend.services.report_service import ReportService, get_report_service


SAMPLE_TEXT = """--- Page 1 ---
DOCENTE TITULAR APELLIDO Y NOMBRE PEREZ, ANA CUIL 27-12345678-4
CARGO A CUBRIR PROFESOR DE EDUCACIÓN MEDIA ASIGNATURA EDUCACIÓN TECNOLÓGICA
CANTIDAD DE HORAS CÁTEDRA A CUBRIR 2.00 AÑO / DIV / COM / NIV 2 / 1 / / Turno Tarde

"""


def _pdf_bytes(writer: PdfWriter) -> bytes:
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


class FakeTextPDFService(PDFService):
    """PDF service returning fixed text instead of reading the PDF."""

    def __init__(self, text: str = SAMPLE_TEXT, page_count: int = 1):
        super().__init__()
        self.text = text
        self.page_count = page_count

    def extract_text(self, file_bytes) -> ExtractedText:
        self._read_bytes(file_bytes)
        return ExtractedText(text=self.text, page_count=self.page_count)


class FakeOpenAIClient:
    """Minimal stand-in for the OpenAI client used by the extraction module."""

    def __init__(self, content: str | None = None, error: Exception | None = None):
        self.content = content
        self.error = error
        self.calls: list[dict] = []
        self.chat = SimpleNamespace(completions=SimpleNamespace(create=self._create))

    def _create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


@pytest.fixture
def mock_ai_service() -> AIService:
    """AI service in mock mode, independent of the environment."""
    return AIService(api_key="", model="gpt-4.1", use_mock=True)


@pytest.fixture
def report_service(mock_ai_service: AIService) -> ReportService:
    """Report service reading fixed PDF text and using mock AI extraction."""
    return ReportService(pdf_service=FakeTextPDFService(), ai_service=mock_ai_service)


@pytest.fixture
def client(report_service: ReportService) -> Generator[TestClient, None, None]:
    """Create a test client for the FastAPI application."""
    app.dependency_overrides[get_report_service] = lambda: report_service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def blank_pdf_bytes() -> bytes:
    """A valid one-page PDF without any text layer."""
    writer = PdfWriter()
    writer.add_blank_page(width=612, height=792)
    return _pdf_bytes(writer)


@pytest.fixture
def two_page_pdf_bytes() -> bytes:
    """A valid two-page PDF without any text layer."""
    writer = PdfWriter()
    writer.add_blank_page(width=612, height=792)
    writer.add_blank_page(width=612, height=792)
    return _pdf_bytes(writer)


@pytest.fixture
def encrypted_pdf_bytes() -> bytes:
    """A PDF protected with a user password."""
    writer = PdfWriter()
    writer.add_blank_page(width=612, height=792)
    writer.encrypt(user_password="secret", owner_password="owner-secret")
    return _pdf_bytes(writer)


@pytest.fixture
def invalid_file_bytes() -> bytes:
    """Create invalid (non-PDF) file bytes for testing."""
    return b"This is not a PDF file"


@pytest.fixture
def sample_fields() -> ExtractedFields:
    """Fields of a secondary-school professor appointment."""
    return ExtractedFields(
        tipo_movimiento="Toma de posesión efectiva",
        expediente="E.E. 7381240/2025 ESC200866",
        fecha="10/02/2026",
        cuil="27-12345678-4",
        rol="",
        apellido_y_nombre="PEREZ, ANA",
        situacion_de_revista="2",
        cargo="PROFESOR DE EDUCACIÓN MEDIA",
        asignatura="EDUCACIÓN TECNOLÓGICA",
        horas_catedra="2.00",
        anio_division="2 / 1 / /",
        turno="Turno Tarde",
        resolucion="1234-2025-GCABA-DGPDYND",
        concurso="CONCURSO 2024",
    )


@pytest.fixture
def sample_ai_response(sample_fields: ExtractedFields) -> str:
    """JSON content the AI returns for the sample document."""
    return json.dumps(sample_fields.model_dump(by_alias=True), ensure_ascii=False)


@pytest.fixture
def fake_openai_client():
    """Factory for fake OpenAI clients with a canned response or error."""
    return FakeOpenAIClient


@pytest.fixture
def fake_pdf_service():
    """Factory for PDF services returning fixed text."""
    return FakeTextPDFService
