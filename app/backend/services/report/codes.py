"""
Job code ("Código de Cargo") lookup.

The code is derived from how the formatted job description starts.
"""

JOB_CODE_TABLE: tuple[tuple[str, str], ...] = (
    ("MAESTRO DE SECCION", "847"),
    ("MAESTRO AUXILIAR", "889"),
    ("MAESTRO DE GRADO", "845"),
    ("AYUDANTE DE CLASES", "1567"),
    ("TP1", "1507"),
    ("TP2", "1528"),
    ("TP3", "1549"),
    ("TP4", "1550"),
    ("TC", "1504"),
    ("VICEDIRECTOR", "1517"),
    ("PRECEPTOR", "1582"),
    ("PROFESOR DE EDUCA", "1599"),
)


def resolve_job_code(
    description: str | None,
    table: tuple[tuple[str, str], ...] = JOB_CODE_TABLE,
) -> str:
    """
    Return the job code for a formatted job description.

    Case-insensitive prefix match, first entry of ``table`` wins.
    Returns "" when no prefix matches.
    """
    if not description:
        return ""

    normalized = description.lstrip().casefold()
    for prefix, code in table:
        if normalized.startswith(prefix.casefold()):
            return code
    return ""
