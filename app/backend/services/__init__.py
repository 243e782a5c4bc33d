"""
Services package for the appointment report application.

Contains:
- pdf_service: PDF text extraction
- ai: OpenAI integration for field extraction
- report: Deterministic report rules (formatting, job codes, assembly)
- report_service: Pipeline from PDF to report
"""

from .ai import AIService
from .pdf_service import PDFService
from .report_service import ReportService

__all__ = ["PDFService", "AIService", "ReportService"]
