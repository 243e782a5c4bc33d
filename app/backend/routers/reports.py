"""
Router for report endpoints.

Handles:
- PDF upload and report generation
- Report rebuild from corrected fields
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status

from ..models import ExtractedFields, ReportResponse
from ..services.ai import AIServiceError
from ..services.pdf_service import PDFConversionError
from ..services.report_service import ReportService, get_report_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reports", tags=["reports"])

GENERIC_AI_ERROR = "Fallo al procesar el documento."


@router.post("", response_model=ReportResponse)
async def create_report(
    file: Annotated[UploadFile, File(description="Appointment PDF to process")],
    report_service: ReportService = Depends(get_report_service),
) -> ReportResponse:
    """
    Upload an appointment PDF and build its report.

    Reads the PDF text, extracts the raw fields with AI and derives the
    job description and job code.
    """
    # Validate file type
    if not file.filename:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No filename provided",
        )

    if not file.filename.lower().endswith(".pdf"):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Only PDF files are accepted",
        )

    try:
        file_bytes = await file.read()

        if not file_bytes:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Empty file provided",
            )

        logger.info("Processing PDF: %s (%d bytes)", file.filename, len(file_bytes))

        try:
            return await report_service.generate(file_bytes, file.filename)
        except PDFConversionError as e:
            logger.error("PDF text extraction failed: %s", e)
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=str(e),
            )
        except AIServiceError as e:
            logger.error("AI field extraction failed: %s", e)
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail=GENERIC_AI_ERROR,
            )

    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Unexpected error processing PDF")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Internal error: {e}",
        )
    finally:
        await file.close()


@router.post("/rebuild", response_model=ReportResponse)
async def rebuild_report(
    fields: ExtractedFields,
    report_service: ReportService = Depends(get_report_service),
) -> ReportResponse:
    """
    Rebuild a report from edited fields.

    Used after a human corrects an extracted value: the job description
    and job code are derived again. The AI is not called.
    """
    return report_service.rebuild(fields)
