"""
Fields to extract from appointment documents.

Each field carries the instruction the AI follows to find it. Only raw
values are requested: the job description and the job code are derived
afterwards by the report rules.
"""

from ...models import FieldDefinition, SchemaDefinition

REPORT_SCHEMA = SchemaDefinition(
    name="designacion_titular",
    description="Teacher appointment (titular) form issued in Argentina",
    fields=[
        FieldDefinition(
            name="tipoMovimiento",
            description=(
                "Type of movement, located in the bottom section of the document: the bold "
                "heading immediately above the 'FECHA:' field. Expected values are "
                "'Toma de posesión efectiva', 'No toma de posesión', 'Prórroga de toma de "
                "posesión' or 'Toma de posesión con solicitud de lic. mayor jerarquía "
                "(Art. 20 G)'. Extract the exact text found in that position."
            ),
            required=False,
        ),
        FieldDefinition(
            name="expediente",
            description=(
                "The 'Número de Expediente' in the bottom section, directly below the "
                "'FECHA' field. It starts with 'E.E.' followed by a number and year and "
                "MUST include the alphanumeric code after the year "
                "(e.g. 'E.E. 7381240/2025 ESC200866'). Do NOT use the "
                "'N° DE EE. DE LA NORMA' found in the middle of the document."
            ),
        ),
        FieldDefinition(
            name="fecha",
            description=(
                "The date right after the label 'FECHA:' in the bottom section "
                "(e.g. 10/02/2026), directly above the 'E.E.' number. Do NOT use the "
                "'Impreso' date at the top or any other date from the middle of the form."
            ),
        ),
        FieldDefinition(
            name="cuil",
            description=(
                "CUIL of the teacher in the 'DOCENTE TITULAR' section, usually next to "
                "the name."
            ),
        ),
        FieldDefinition(
            name="rol",
            description="Value next to 'Rol:'. Return an empty string if missing or empty.",
            required=False,
        ),
        FieldDefinition(
            name="apellidoYNombre",
            description="Value of 'APELLIDO Y NOMBRE' under 'DOCENTE TITULAR'.",
        ),
        FieldDefinition(
            name="situacionDeRevista",
            description="Situation of the teacher. Always the string '2' (Titular).",
        ),
        FieldDefinition(
            name="cargo",
            description="Value of 'CARGO A CUBRIR', exactly as written, without the label.",
        ),
        FieldDefinition(
            name="asignatura",
            description="Value of 'ASIGNATURA', without the label. Empty string if blank.",
            required=False,
        ),
        FieldDefinition(
            name="horasCatedra",
            description=(
                "Value of 'CANTIDAD DE HORAS CÁTEDRA A CUBRIR' exactly as written "
                "(e.g. '2.00'). Empty string if blank."
            ),
            required=False,
        ),
        FieldDefinition(
            name="anioDivision",
            description=(
                "Raw value of 'AÑO / DIV / COM / NIV' exactly as written, keeping the "
                "slashes (e.g. '2 / 1 / /'). Empty string if blank."
            ),
            required=False,
        ),
        FieldDefinition(
            name="turno",
            description="Value of 'Turno' (e.g. 'Turno Tarde'), as written.",
            required=False,
        ),
        FieldDefinition(
            name="resolucion",
            description=(
                "Value of 'N° DE RESOLUCION DE ALTA', in the middle section, formatted "
                "as NNNN-YYYY-GCABA-XXXXX."
            ),
        ),
        FieldDefinition(
            name="concurso",
            description="Value labeled 'CONCURSO', usually in the middle section of the form.",
        ),
    ],
)
