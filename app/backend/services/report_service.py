"""
Report generation pipeline.

PDF text -> AI field extraction -> job description and job code
derivation -> report assembly -> display rows.
"""

import logging
from typing import BinaryIO

from ..models import ExtractedFields, ReportResponse
from .ai import AIService, get_ai_service
from .pdf_service import PDFService, get_pdf_service
from .report import (
    assemble_report,
    format_job_description,
    render_report_rows,
    resolve_job_code,
)

logger = logging.getLogger(__name__)


def build_report(
    fields: ExtractedFields,
    source_file: str = "",
    page_count: int = 0,
    warnings: list[str] | None = None,
) -> ReportResponse:
    """Derive the job description and code, then assemble the report."""
    cargo_a_cubrir = format_job_description(
        fields.cargo,
        fields.asignatura,
        fields.horas_catedra,
        fields.anio_division,
        fields.turno,
    )
    cc = resolve_job_code(cargo_a_cubrir)
    record = assemble_report(fields, cargo_a_cubrir, cc)

    logger.info("Report built: cargoACubrir=%r cc=%r", cargo_a_cubrir, cc)

    return ReportResponse(
        source_file=source_file,
        page_count=page_count,
        report=record,
        rows=render_report_rows(record),
        warnings=list(warnings or []),
    )


class ReportService:
    """Turns an appointment PDF into a report."""

    def __init__(
        self,
        pdf_service: PDFService | None = None,
        ai_service: AIService | None = None,
    ):
        self.pdf_service = pdf_service or get_pdf_service()
        self.ai_service = ai_service or get_ai_service()

    async def generate(
        self, file_bytes: bytes | BinaryIO, source_file: str = ""
    ) -> ReportResponse:
        """
        Run the full pipeline for one document.

        Raises:
            PDFConversionError: If the PDF text cannot be read.
            AIServiceError: If the field extraction fails.
        """
        extracted_text = self.pdf_service.extract_text(file_bytes)
        logger.info(
            "Processing '%s': %d page(s)", source_file, extracted_text.page_count
        )

        extraction = await self.ai_service.extract_fields(extracted_text.text)

        return build_report(
            extraction.fields,
            source_file=source_file,
            page_count=extracted_text.page_count,
            warnings=extraction.warnings,
        )

    def rebuild(self, fields: ExtractedFields) -> ReportResponse:
        """Rebuild a report from (manually corrected) fields, without the AI."""
        return build_report(fields)


# Singleton instance for convenience
_report_service: ReportService | None = None


def get_report_service() -> ReportService:
    """Get or create the report service singleton."""
    global _report_service
    if _report_service is None:
        _report_service = ReportService()
    return _report_service
