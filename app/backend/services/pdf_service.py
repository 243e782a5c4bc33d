"""
PDF processing service using pypdf.

Extracts the embedded text layer of PDF documents for AI processing.
"""

import io
import logging
from dataclasses import dataclass
from typing import BinaryIO

from pypdf import PdfReader
from pypdf.errors import FileNotDecryptedError, PdfReadError

logger = logging.getLogger(__name__)


class PDFConversionError(Exception):
    """Raised when text cannot be extracted from a PDF."""

    pass


class EncryptedPDFError(PDFConversionError):
    """Raised when the PDF is password-protected."""

    pass


class NoExtractableTextError(PDFConversionError):
    """Raised when the PDF has no text layer (image-based or blank)."""

    pass


@dataclass
class ExtractedText:
    """Text content of a PDF.

    Attributes:
        text: Page texts, each preceded by a "--- Page N ---" marker.
        page_count: Number of pages read.
    """
    text: str
    page_count: int


class PDFService:
    """
    Service for PDF processing operations.

    Uses pypdf to read the text layer page by page. No OCR is attempted.
    """

    def __init__(self, page_marker: str = "--- Page {number} ---"):
        """
        Initialize the PDF service.

        Args:
            page_marker: Header written before each page's text.
        """
        self.page_marker = page_marker

    def _read_bytes(self, file_bytes: bytes | BinaryIO) -> bytes:
        # Ensure we have bytes
        if hasattr(file_bytes, "read"):
            pdf_bytes = file_bytes.read()
        else:
            pdf_bytes = file_bytes

        if not pdf_bytes:
            raise PDFConversionError("Empty PDF file provided")

        # Validate PDF magic bytes
        if not pdf_bytes[:4] == b"%PDF":
            raise PDFConversionError(
                "Invalid PDF file: does not start with PDF header"
            )
        return pdf_bytes

    def _open(self, pdf_bytes: bytes) -> PdfReader:
        try:
            reader = PdfReader(io.BytesIO(pdf_bytes))
        except PdfReadError as e:
            logger.error("PDF read error: %s", e)
            raise PDFConversionError(
                "Failed to process the PDF file. It might be corrupted or in an unsupported format."
            ) from e
        except Exception as e:
            logger.exception("Unexpected error opening PDF")
            raise PDFConversionError(f"Invalid or corrupted PDF file: {e}") from e

        if reader.is_encrypted:
            # Owner-password-only files open with an empty user password
            try:
                decrypted = reader.decrypt("")
            except Exception as e:
                logger.error("Could not decrypt PDF: %s", e)
                decrypted = 0
            if not decrypted:
                raise EncryptedPDFError(
                    "The PDF is password-protected. Please provide an unlocked document."
                )
        return reader

    def extract_text(self, file_bytes: bytes | BinaryIO) -> ExtractedText:
        """
        Extract the text of every page.

        Args:
            file_bytes: PDF file as bytes or file-like object.

        Returns:
            ExtractedText with the concatenated page texts.

        Raises:
            EncryptedPDFError: If the PDF requires a password.
            NoExtractableTextError: If no page has any text.
            PDFConversionError: If the PDF cannot be read for any other reason.
        """
        reader = self._open(self._read_bytes(file_bytes))

        try:
            chunks = []
            for number, page in enumerate(reader.pages, start=1):
                page_text = page.extract_text() or ""
                chunks.append(
                    f"{self.page_marker.format(number=number)}\n{page_text}\n\n"
                )
        except FileNotDecryptedError as e:
            raise EncryptedPDFError(
                "The PDF is password-protected. Please provide an unlocked document."
            ) from e
        except PdfReadError as e:
            logger.error("PDF text extraction failed: %s", e)
            raise PDFConversionError(
                "Failed to process the PDF file. It might be corrupted or in an unsupported format."
            ) from e
        except Exception as e:
            logger.exception("Unexpected error during PDF text extraction")
            raise PDFConversionError(f"PDF text extraction failed: {e}") from e

        page_count = len(chunks)
        text = "".join(chunks)

        # Page markers alone do not count as content
        has_content = any(
            chunk.split("\n", 1)[1].strip() for chunk in chunks
        )
        if not has_content:
            raise NoExtractableTextError(
                "No se pudo extraer la información del PDF. "
                "The document might be image-based or corrupted."
            )

        logger.info(
            "Extracted %d characters from %d page(s)", len(text), page_count
        )
        return ExtractedText(text=text, page_count=page_count)

    def get_page_count(self, file_bytes: bytes | BinaryIO) -> int:
        """
        Get the total number of pages in a PDF.

        Args:
            file_bytes: PDF file as bytes or file-like object.

        Returns:
            Number of pages in the PDF.

        Raises:
            PDFConversionError: If page count cannot be determined.
        """
        reader = self._open(self._read_bytes(file_bytes))
        try:
            return len(reader.pages)
        except Exception as e:
            logger.error("Could not get page count: %s", e)
            raise PDFConversionError(f"Could not get page count: {e}") from e


# Singleton instance for convenience
_pdf_service: PDFService | None = None


def get_pdf_service() -> PDFService:
    """Get or create the PDF service singleton."""
    global _pdf_service
    if _pdf_service is None:
        _pdf_service = PDFService()
    return _pdf_service
