"""
Pydantic models for the appointment report pipeline.

Defines the raw fields extracted from the document, the institution
constants, the assembled report record and the API response models.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class FieldDefinition(BaseModel):
    """
    Definition of a single field the AI is asked to extract.

    Attributes:
        name: Wire name of the field (camelCase, as in the report).
        description: Free-text extraction instruction for the AI.
        required: Whether the document is expected to carry this field.
    """

    name: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Unique field identifier",
        examples=["expediente", "apellidoYNombre"],
    )
    description: str = Field(
        ...,
        min_length=1,
        max_length=1000,
        description="Instruction to guide AI extraction",
    )
    required: bool = Field(
        default=True,
        description="Whether this field must be present",
    )

    @field_validator("name")
    @classmethod
    def validate_name_format(cls, v: str) -> str:
        """Ensure field name is a valid identifier."""
        if not v.isalnum():
            raise ValueError("Field name must contain only alphanumeric characters")
        return v


class SchemaDefinition(BaseModel):
    """
    Complete set of fields to extract from one document type.

    Attributes:
        name: Identifier for this schema, sent as the JSON schema name.
        description: What document type this schema handles.
        fields: Field definitions to extract, in report order.
    """

    name: str = Field(
        ...,
        min_length=1,
        max_length=64,
        pattern=r"^[a-zA-Z0-9_-]+$",
        description="Schema name",
    )
    description: str = Field(
        default="",
        max_length=1000,
        description="Description of the document type",
    )
    fields: list[FieldDefinition] = Field(
        ...,
        min_length=1,
        description="List of fields to extract",
    )

    @field_validator("fields")
    @classmethod
    def validate_unique_field_names(
        cls, v: list[FieldDefinition]
    ) -> list[FieldDefinition]:
        """Ensure all field names are unique."""
        names = [f.name for f in v]
        if len(names) != len(set(names)):
            raise ValueError("All field names must be unique within a schema")
        return v

    @property
    def field_names(self) -> list[str]:
        return [f.name for f in self.fields]


class ExtractedFields(BaseModel):
    """
    Raw field values pulled out of an appointment document.

    Every value is a plain string. ``horas_catedra`` is expected to hold
    a decimal number but is not validated as one: the formatter treats
    anything unparsable as zero hours.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    tipo_movimiento: str = ""
    expediente: str = ""
    fecha: str = ""
    cuil: str = ""
    rol: str = ""
    apellido_y_nombre: str = ""
    situacion_de_revista: str = ""
    cargo: str = ""
    asignatura: str = ""
    horas_catedra: str = ""
    anio_division: str = ""
    turno: str = ""
    resolucion: str = ""
    concurso: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def coerce_to_text(cls, v: Any) -> str:
        """Accept null and numeric values the AI may return."""
        if v is None:
            return ""
        if isinstance(v, bool):
            return "Sí" if v else "No"
        if isinstance(v, (int, float)):
            return str(v)
        if isinstance(v, str):
            return v.strip()
        raise ValueError(f"Expected a text value, got {type(v).__name__}")


class InstitutionConstants(BaseModel):
    """Fixed data of the issuing institution, added to every report."""

    model_config = ConfigDict(frozen=True)

    establecimiento: str = "E.N.S. 2 EN L.VIVAS M. ACOSTA"
    telefono: str = "49317981"
    delegacion: str = "III"
    reparticion: str = "3511"


INSTITUTION = InstitutionConstants()


class ExtractionResult(BaseModel):
    """Result of the AI field extraction for one document."""

    fields: ExtractedFields = Field(
        ...,
        description="Normalized field values returned by the AI",
    )
    warnings: list[str] = Field(
        default_factory=list,
        description="List of warnings encountered during extraction",
    )


class ReportRecord(ExtractedFields):
    """
    Final report: extracted fields, derived fields and institution data.

    Immutable once assembled.
    """

    model_config = ConfigDict(frozen=True)

    cargo_a_cubrir: str = ""
    cc: str = ""
    establecimiento: str = ""
    telefono: str = ""
    delegacion: str = ""
    reparticion: str = ""


# =============================================================================
# API Models
# =============================================================================


class ReportRow(BaseModel):
    """One labeled line of the rendered report."""

    label: str
    value: str


class ReportResponse(BaseModel):
    """Response model for the report endpoints."""

    source_file: str = Field(
        default="",
        description="Original filename of the processed document",
    )
    page_count: int = Field(
        default=0,
        ge=0,
        description="Pages read from the document (0 when rebuilt from fields)",
    )
    report: ReportRecord = Field(..., description="Assembled report record")
    rows: list[ReportRow] = Field(
        default_factory=list,
        description="Report lines in display order",
    )
    warnings: list[str] = Field(
        default_factory=list,
        description="Warnings encountered during extraction",
    )


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(default="healthy")
    message: str = Field(default="")
    version: str = Field(default="1.0.0")
