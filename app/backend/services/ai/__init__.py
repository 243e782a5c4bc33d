"""
AI service package for appointment field extraction.

This package provides:
- fields: Field definitions sent to the AI
- extraction: Prompt construction and the OpenAI call
- validation: Shape validation and normalization of the response

The AIService class holds the client configuration and delegates to
these modules.
"""

import logging

from ...models import ExtractedFields, ExtractionResult, SchemaDefinition
from .exceptions import AIServiceError
from .extraction import (
    _build_extraction_prompt as _build_extraction_prompt_func,
    extract_fields as _extract_fields,
)
from .fields import REPORT_SCHEMA
from .validation import ValidationResult, validate_extracted_data

logger = logging.getLogger(__name__)

__all__ = [
    "AIService",
    "AIServiceError",
    "REPORT_SCHEMA",
    "ValidationResult",
    "extract_fields",
    "get_ai_service",
    "validate_extracted_data",
]


# =============================================================================
# AIService Class
# =============================================================================


class AIService:
    """
    Service for AI-powered field extraction.

    Uses an OpenAI chat model with structured outputs to read the raw
    fields of an appointment document from its text.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        use_mock: bool = False,
        schema: SchemaDefinition = REPORT_SCHEMA,
    ):
        """
        Initialize the AI service.

        Args:
            api_key: OpenAI API key. If None, reads from config/environment.
            model: OpenAI model to use. If None, reads from config.
            use_mock: If True, return mock data instead of calling OpenAI.
            schema: Fields to extract.
        """
        if api_key is None or model is None:
            from ...config import get_settings

            settings = get_settings()
            if api_key is None:
                api_key = settings.openai_api_key
            if model is None:
                model = settings.openai_model

        self.api_key = api_key
        self.model = model
        self.schema = schema
        self.use_mock = use_mock or not self.api_key
        self._client = None

        if self.use_mock:
            logger.warning(
                "AI Service running in MOCK MODE. Set OPENAI_API_KEY in .env for real extraction."
            )

    @property
    def client(self):
        """Lazy-load the OpenAI client."""
        if self._client is None:
            if not self.api_key:
                raise AIServiceError(
                    "OpenAI API key not provided. Set OPENAI_API_KEY environment variable."
                )
            from openai import OpenAI

            self._client = OpenAI(api_key=self.api_key)
        return self._client

    async def extract_fields(self, text: str) -> ExtractionResult:
        """
        Extract the raw report fields from document text.

        Delegates to the extraction module.

        Args:
            text: Full document text.

        Returns:
            ExtractionResult with normalized fields and warnings.
        """
        return await _extract_fields(
            text,
            self.schema,
            client=None if self.use_mock else self.client,
            model=self.model,
            use_mock=self.use_mock,
            get_mock_extraction=self._get_mock_extraction if self.use_mock else None,
        )

    def _build_extraction_prompt(self, text: str) -> str:
        """Build the extraction prompt for this service's schema."""
        return _build_extraction_prompt_func(self.schema, text)

    def _get_mock_extraction(self, schema: SchemaDefinition) -> ExtractionResult:
        """Return mock extraction data for development."""
        fields = ExtractedFields(
            tipo_movimiento="Toma de posesión efectiva",
            expediente="E.E. 7381240/2025 ESC200866",
            fecha="10/02/2026",
            cuil="20-12345678-9",
            rol="",
            apellido_y_nombre="MOCK, DOCENTE",
            situacion_de_revista="2",
            cargo="PROFESOR DE EDUCACIÓN MEDIA",
            asignatura="EDUCACIÓN TECNOLÓGICA",
            horas_catedra="2.00",
            anio_division="2 / 1 / /",
            turno="Turno Tarde",
            resolucion="0001-2025-GCABA-MOCK",
            concurso="MOCK-CONCURSO",
        )
        return ExtractionResult(
            fields=fields,
            warnings=[
                "DEVELOPMENT MODE: Using mock data. Set OPENAI_API_KEY for real extraction."
            ],
        )


# =============================================================================
# Singleton Factory
# =============================================================================

_ai_service: AIService | None = None


def get_ai_service() -> AIService:
    """Get or create the AI service singleton."""
    global _ai_service
    if _ai_service is None:
        _ai_service = AIService()
    return _ai_service


# Re-export module function for direct use without AIService class
extract_fields = _extract_fields
