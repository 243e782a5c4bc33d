"""
Field extraction from document text.

Uses OpenAI chat completions with a strict JSON schema response format.
"""

import json
import logging
from typing import Any, Callable

from ...models import ExtractionResult, SchemaDefinition
from .exceptions import AIServiceError
from .validation import validate_extracted_data

logger = logging.getLogger(__name__)


# =============================================================================
# Extraction System Prompt
# =============================================================================

EXTRACTION_SYSTEM_PROMPT = """You are a precise Data Entry Clerk working on teacher appointment forms from Argentina.
Your task is to extract specific data fields from the OCR text of a document.

## Extraction Rules:

1. **Strict Adherence**: Only extract the fields specified. Do not add extra fields.
2. **Accuracy Over Guessing**: If a value is unclear or not present, return an empty string. DO NOT HALLUCINATE.
3. **Preserve Original Format**: Keep dates, numbers, codes and slashes exactly as they appear in the text.
4. **No Field Labels**: Return only the values, never the labels printed next to them.
5. **No Assumptions**: Do not combine, reformat or calculate values.

Return data in the EXACT JSON format specified in the user prompt."""


# =============================================================================
# Helper Functions
# =============================================================================


def _build_extraction_prompt(schema: SchemaDefinition, text: str) -> str:
    """Build the extraction prompt for one document from the schema."""
    field_descriptions = []
    for field in schema.fields:
        required_marker = " (REQUIRED)" if field.required else " (optional)"
        field_descriptions.append(
            f"- **{field.name}**{required_marker}: {field.description}"
        )

    fields_text = "\n".join(field_descriptions)

    return f"""Analyze the following OCR text from a document about a teacher appointment in Argentina.
Extract ONLY the fields listed below and return them as a JSON object.

## Fields to Extract:
{fields_text}

For any field that cannot be found, return an empty string "".

Field names to extract: {json.dumps(schema.field_names)}

Here is the document text:
---
{text}
---"""


def _build_response_format(schema: SchemaDefinition) -> dict[str, Any]:
    """Build a strict JSON schema response format: every field is a required string."""
    return {
        "type": "json_schema",
        "json_schema": {
            "name": schema.name,
            "strict": True,
            "schema": {
                "type": "object",
                "properties": {
                    field.name: {"type": "string", "description": field.description}
                    for field in schema.fields
                },
                "required": schema.field_names,
                "additionalProperties": False,
            },
        },
    }


# =============================================================================
# Main Extraction Function
# =============================================================================


async def extract_fields(
    text: str,
    schema: SchemaDefinition,
    client: Any,  # OpenAI client
    model: str = "gpt-4.1",
    use_mock: bool = False,
    get_mock_extraction: Callable[[SchemaDefinition], ExtractionResult] | None = None,
) -> ExtractionResult:
    """
    Extract raw field values from document text.

    Args:
        text: Full document text (page-marked).
        schema: The fields to extract.
        client: OpenAI client instance.
        model: Model name to use.
        use_mock: If True, return mock extraction instead of calling OpenAI.
        get_mock_extraction: Function to get mock extraction (for testing).

    Returns:
        ExtractionResult with normalized fields and warnings.

    Raises:
        AIServiceError: If the call fails or the response has the wrong shape.
    """
    if use_mock and get_mock_extraction:
        logger.info("Extracting fields (MOCK MODE)")
        return get_mock_extraction(schema)

    logger.info(
        "Extracting %d field(s) from %d characters using schema '%s'",
        len(schema.fields),
        len(text),
        schema.name,
    )

    try:
        response = client.chat.completions.create(
            model=model,
            messages=[
                {"role": "system", "content": EXTRACTION_SYSTEM_PROMPT},
                {"role": "user", "content": _build_extraction_prompt(schema, text)},
            ],
            response_format=_build_response_format(schema),
            temperature=0,
        )

        content = response.choices[0].message.content
        if not content:
            raise AIServiceError("Empty response from OpenAI")

        try:
            response_data = json.loads(content)
        except json.JSONDecodeError as e:
            logger.error("Failed to parse extraction response: %s", content[:500])
            raise AIServiceError(f"Invalid JSON in extraction response: {e}") from e

        validation = validate_extracted_data(response_data, schema)

        logger.info(
            "Extraction completed: %d field(s), %d warning(s)",
            len(response_data),
            len(validation.warnings),
        )

        return ExtractionResult(
            fields=validation.fields,
            warnings=validation.warnings,
        )

    except AIServiceError:
        raise
    except Exception as e:
        logger.exception("Field extraction failed")
        raise AIServiceError(f"Field extraction failed: {e}") from e
