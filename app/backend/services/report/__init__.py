"""
Deterministic report rules.

- formatting: job description ("cargo a cubrir") construction
- codes: job code lookup from the description prefix
- assembly: merge of extracted fields, derived fields and institution data
- rendering: labeled rows for display
"""

from .assembly import assemble_report
from .codes import JOB_CODE_TABLE, resolve_job_code
from .formatting import format_job_description, format_year_division, parse_hours
from .rendering import REPORT_LABELS, render_report_rows

__all__ = [
    "JOB_CODE_TABLE",
    "REPORT_LABELS",
    "assemble_report",
    "format_job_description",
    "format_year_division",
    "parse_hours",
    "render_report_rows",
    "resolve_job_code",
]
