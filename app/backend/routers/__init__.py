"""
Routers package for FastAPI endpoints.

Organized by domain:
- reports: Report generation from PDFs and rebuild from edited fields
"""

from . import reports

__all__ = ["reports"]
