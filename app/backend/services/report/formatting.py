"""
Job description formatting.

Builds the ``cargoACubrir`` string from the raw labeled fields of the
appointment document.
"""

import logging
import math
import re

logger = logging.getLogger(__name__)

PART_SEPARATOR = ", "
HOURS_SUFFIX = " hs"
DEGREE_SIGN = "°"

_LEADING_NUMBER = re.compile(r"^\d+")


def parse_hours(value: str | None) -> float:
    """
    Parse the hour count of the document.

    Accepts "2.00" and "2,00". Returns 0.0 for missing, unparsable or
    non-finite input.
    """
    if value is None:
        return 0.0

    text = str(value).strip().replace(",", ".")
    if not text:
        return 0.0

    try:
        hours = float(text)
    except ValueError:
        logger.debug("Unparsable hour count %r, treating as 0", value)
        return 0.0

    if not math.isfinite(hours):
        return 0.0
    return hours


def format_year_division(value: str | None) -> str:
    """
    Turn an "AÑO / DIV / COM / NIV" value into degree tokens.

    "2 / 1 / /" -> "2° 1°". Empty segments are dropped; a segment that
    does not start with a number is kept as-is.
    """
    if not value:
        return ""

    tokens = []
    for segment in value.split("/"):
        segment = segment.strip()
        if not segment:
            continue
        if _LEADING_NUMBER.match(segment):
            tokens.append(f"{segment}{DEGREE_SIGN}")
        else:
            tokens.append(segment)
    return " ".join(tokens)


def format_job_description(
    cargo: str | None,
    asignatura: str | None,
    horas_raw: str | None,
    anio_division_raw: str | None,
    turno: str | None,
) -> str:
    """
    Build the formatted job description.

    Parts, in order: job title, subject, "<hours> hs" and the year/division
    token (both only when hours > 0). The shift goes last, separated from
    the previous part by a single space. Never raises.

    Example:
        >>> format_job_description(
        ...     "PROFESOR DE EDUCACIÓN MEDIA", "EDUCACIÓN TECNOLÓGICA",
        ...     "2.00", "2 / 1 / /", "Turno Tarde")
        'PROFESOR DE EDUCACIÓN MEDIA, EDUCACIÓN TECNOLÓGICA, 2.00 hs, 2° 1° Turno Tarde'
    """
    parts = [(cargo or "").strip(), (asignatura or "").strip()]

    if parse_hours(horas_raw) > 0:
        parts.append(f"{str(horas_raw).strip()}{HOURS_SUFFIX}")
        parts.append(format_year_division(anio_division_raw))

    description = PART_SEPARATOR.join(part for part in parts if part)

    shift = (turno or "").strip()
    if shift:
        description = f"{description} {shift}" if description else shift

    return description
