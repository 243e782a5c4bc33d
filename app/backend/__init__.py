"""
Appointment Report Backend Application.

A FastAPI service that reads teacher appointment PDFs, extracts their
fields using AI (OpenAI) and builds the ABM report.
"""

__version__ = "1.0.0"
