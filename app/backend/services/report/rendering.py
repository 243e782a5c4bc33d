"""
Report rendering for display.
"""

from ...models import ReportRecord, ReportRow

# Display order of the printed report
REPORT_LABELS: tuple[tuple[str, str], ...] = (
    ("tipo_movimiento", "Tipo de movimiento"),
    ("expediente", "Expediente"),
    ("establecimiento", "Establecimiento"),
    ("telefono", "Teléfono"),
    ("delegacion", "Delegación"),
    ("reparticion", "Repartición"),
    ("cuil", "CUIL"),
    ("rol", "Rol"),
    ("apellido_y_nombre", "Apellido y nombre"),
    ("situacion_de_revista", "Situación de revista"),
    ("fecha", "Fecha"),
    ("cc", "CC"),
    ("cargo_a_cubrir", "Cargo a cubrir"),
    ("concurso", "Concurso"),
    ("resolucion", "Resolución"),
)


def render_report_rows(record: ReportRecord) -> list[ReportRow]:
    """Return the report as labeled rows in display order."""
    return [
        ReportRow(label=label, value=getattr(record, attribute, "") or "")
        for attribute, label in REPORT_LABELS
    ]
