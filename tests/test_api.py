"""Tests for FastAPI endpoints."""

from fastapi.testclient import TestClient

from app.backend.main import app
from app.backend.services.ai import AIService
from app.backend.services.pdf_service import PDFService
from app.backend.services.report_service import ReportService, get_report_service


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    def test_root_endpoint(self, client: TestClient):
        """Test root endpoint returns health status."""
        response = client.get("/")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "version" in data

    def test_health_endpoint(self, client: TestClient):
        """Test /health endpoint returns health status."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestCreateReportEndpoint:
    """Tests for POST /reports."""

    def test_create_report(self, client: TestClient):
        """Test the full pipeline with fixed PDF text and mock AI."""
        response = client.post(
            "/reports",
            files={"file": ("alta.pdf", b"%PDF-1.4 test", "application/pdf")},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["source_file"] == "alta.pdf"
        assert data["page_count"] == 1
        report = data["report"]
        assert report["cargoACubrir"] == (
            "PROFESOR DE EDUCACIÓN MEDIA, EDUCACIÓN TECNOLÓGICA, 2.00 hs, 2° 1° Turno Tarde"
        )
        assert report["cc"] == "1599"
        assert report["telefono"] == "49317981"
        assert report["delegacion"] == "III"
        assert report["reparticion"] == "3511"
        assert data["rows"][0]["label"] == "Tipo de movimiento"

    def test_rejects_non_pdf(self, client: TestClient):
        """Test that non-PDF files are rejected."""
        response = client.post(
            "/reports",
            files={"file": ("test.txt", b"not a pdf", "text/plain")},
        )
        assert response.status_code == 400
        assert "PDF" in response.json()["detail"]

    def test_rejects_empty_file(self, client: TestClient):
        """Test that empty files are rejected."""
        response = client.post(
            "/reports",
            files={"file": ("test.pdf", b"", "application/pdf")},
        )
        assert response.status_code == 400
        assert "Empty" in response.json()["detail"]

    def test_requires_file(self, client: TestClient):
        response = client.post("/reports")
        assert response.status_code == 422  # FastAPI validation error

    def test_rejects_invalid_pdf(self, client: TestClient, invalid_file_bytes: bytes):
        """Test that invalid PDF content is rejected."""
        response = client.post(
            "/reports",
            files={"file": ("test.pdf", invalid_file_bytes, "application/pdf")},
        )
        assert response.status_code == 422


class TestPDFErrors:
    """Tests for PDF errors with the real PDF service."""

    def _client_with_real_pdf_service(self, mock_ai_service: AIService) -> TestClient:
        service = ReportService(pdf_service=PDFService(), ai_service=mock_ai_service)
        app.dependency_overrides[get_report_service] = lambda: service
        return TestClient(app)

    def test_blank_pdf_returns_422(self, mock_ai_service: AIService, blank_pdf_bytes: bytes):
        try:
            client = self._client_with_real_pdf_service(mock_ai_service)
            response = client.post(
                "/reports",
                files={"file": ("blank.pdf", blank_pdf_bytes, "application/pdf")},
            )
        finally:
            app.dependency_overrides.clear()
        assert response.status_code == 422
        assert "image-based" in response.json()["detail"]

    def test_encrypted_pdf_returns_422(
        self, mock_ai_service: AIService, encrypted_pdf_bytes: bytes
    ):
        try:
            client = self._client_with_real_pdf_service(mock_ai_service)
            response = client.post(
                "/reports",
                files={"file": ("locked.pdf", encrypted_pdf_bytes, "application/pdf")},
            )
        finally:
            app.dependency_overrides.clear()
        assert response.status_code == 422
        assert "password-protected" in response.json()["detail"]


class TestAIErrors:
    """Tests for AI failures."""

    def test_ai_failure_returns_503(self, fake_pdf_service, fake_openai_client):
        ai_service = AIService(api_key="fake-key", model="gpt-test")
        ai_service._client = fake_openai_client(error=RuntimeError("quota exceeded"))
        service = ReportService(pdf_service=fake_pdf_service(), ai_service=ai_service)
        app.dependency_overrides[get_report_service] = lambda: service
        try:
            response = TestClient(app).post(
                "/reports",
                files={"file": ("alta.pdf", b"%PDF-1.4 test", "application/pdf")},
            )
        finally:
            app.dependency_overrides.clear()
        assert response.status_code == 503
        assert response.json()["detail"] == "Fallo al procesar el documento."


class TestRebuildEndpoint:
    """Tests for POST /reports/rebuild."""

    def test_rebuild_from_wire_names(self, client: TestClient):
        response = client.post(
            "/reports/rebuild",
            json={
                "cargo": "maestro de grado",
                "horasCatedra": "0",
                "anioDivision": "3 / 2 / /",
                "turno": "Turno Mañana",
                "apellidoYNombre": "GOMEZ, LUIS",
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["report"]["cargoACubrir"] == "maestro de grado Turno Mañana"
        assert data["report"]["cc"] == "845"
        assert data["report"]["apellidoYNombre"] == "GOMEZ, LUIS"
        assert data["page_count"] == 0

    def test_rebuild_accepts_attribute_names(self, client: TestClient):
        response = client.post(
            "/reports/rebuild",
            json={"cargo": "TP3", "horas_catedra": "4", "anio_division": "1 / 1 / /"},
        )
        assert response.status_code == 200
        assert response.json()["report"]["cargoACubrir"] == "TP3, 4 hs, 1° 1°"

    def test_rebuild_rejects_nested_values(self, client: TestClient):
        response = client.post("/reports/rebuild", json={"cargo": {"a": 1}})
        assert response.status_code == 422


class TestCORS:
    """Tests for CORS configuration."""

    def test_cors_allows_localhost_3000(self, client: TestClient):
        """Test that localhost:3000 is allowed."""
        response = client.get(
            "/health",
            headers={"Origin": "http://localhost:3000"},
        )
        assert response.status_code == 200
        assert (
            response.headers.get("access-control-allow-origin")
            == "http://localhost:3000"
        )
