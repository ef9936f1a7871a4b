# =============================================================================
# Template Validation
# =============================================================================
# A quick pre-flight check of a template's overall shape, run before
# rendering. It only answers "is there something to render?". Element
# contents and style values are not checked, and nothing is normalized.
# =============================================================================

from collections.abc import Mapping, Sequence
from typing import Any

from mailsmith.core.document import Document
from mailsmith.rendering.results import ValidationResult


def validate_document(candidate: Any) -> ValidationResult:
    """
    Check that a template is present and has at least one element.

    Checks, in order:
        1. The template is present
        2. It has an "elements" list
        3. The list is not empty

    Args:
        candidate: A Document or a template in its JSON shape.

    Returns:
        ValidationResult; `error` names the first check that failed.
    """
    if candidate is None:
        return ValidationResult(valid=False, error="Template data is required")

    if isinstance(candidate, Document):
        elements = candidate.elements
    elif isinstance(candidate, Mapping):
        elements = candidate.get("elements")
    else:
        elements = None

    if not isinstance(elements, Sequence) or isinstance(elements, (str, bytes)):
        return ValidationResult(valid=False, error="Template must have elements array")

    if len(elements) == 0:
        return ValidationResult(valid=False, error="Template must have at least one element")

    return ValidationResult(valid=True)
