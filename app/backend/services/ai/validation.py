"""
Validation and normalization of the AI response.

Checks only the shape of the returned data; the semantic correctness of
the values is not verified.
"""

import logging
from typing import Any

from pydantic import ValidationError

from ...models import ExtractedFields, SchemaDefinition
from .exceptions import AIServiceError

logger = logging.getLogger(__name__)


class ValidationResult:
    """Result of data validation."""

    def __init__(self, fields: ExtractedFields | None = None):
        self.fields: ExtractedFields = fields or ExtractedFields()
        self.warnings: list[str] = []


def validate_extracted_data(
    data: Any,
    schema: SchemaDefinition,
) -> ValidationResult:
    """
    Normalize raw AI output into ExtractedFields.

    - Non-object responses are rejected.
    - Null and numeric values become text; keys outside the schema are dropped.
    - Required fields that came back empty produce a warning.

    Raises:
        AIServiceError: If the data does not have the expected shape.
    """
    if not isinstance(data, dict):
        raise AIServiceError(
            f"Unexpected extraction response: expected an object, got {type(data).__name__}"
        )

    known = set(schema.field_names)
    unknown = sorted(k for k in data if k not in known)
    if unknown:
        logger.info("Ignoring fields outside the schema: %s", unknown)

    try:
        fields = ExtractedFields.model_validate(
            {k: v for k, v in data.items() if k in known}
        )
    except ValidationError as e:
        logger.error("Extraction response failed validation: %s", e)
        raise AIServiceError(f"Invalid extraction response: {e}") from e

    result = ValidationResult(fields)
    values = fields.model_dump(by_alias=True)
    for field in schema.fields:
        if field.required and not values.get(field.name):
            result.warnings.append(f"Could not extract required field: {field.name}")

    if result.warnings:
        logger.warning(
            "Extraction completed with %d warning(s): %s",
            len(result.warnings),
            result.warnings,
        )
    return result
