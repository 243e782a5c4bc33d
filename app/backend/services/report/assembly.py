"""
Report assembly.

Merges the extracted fields with the derived fields and the institution
constants into the final, immutable report record.
"""

from ...models import INSTITUTION, ExtractedFields, InstitutionConstants, ReportRecord


def assemble_report(
    fields: ExtractedFields,
    cargo_a_cubrir: str,
    cc: str,
    institution: InstitutionConstants = INSTITUTION,
) -> ReportRecord:
    """
    Build the report record for one document.

    Every extracted value is copied unchanged; missing values stay empty
    and are left for the display layer to present.
    """
    return ReportRecord(
        **fields.model_dump(),
        cargo_a_cubrir=cargo_a_cubrir,
        cc=cc,
        **institution.model_dump(),
    )
