# =============================================================================
# Mailsmith Core Module
# =============================================================================
# This module contains the core template model. These are pure Python
# dataclasses and helpers with no external dependencies, so they can be
# imported anywhere without causing circular dependency issues.
#
# The core concepts:
#   - Document: A template (name, ordered elements, page settings)
#   - Settings: Page-level settings after defaults are applied
#   - ElementKind: Canonical element tag after alias resolution
# =============================================================================

from mailsmith.core.document import (
    DEFAULT_SETTINGS,
    DEFAULT_TEMPLATE_NAME,
    Document,
    DocumentError,
    Settings,
)
from mailsmith.core.element import (
    ElementKind,
    TYPE_ALIASES,
    child_list,
    element_type,
    first_value,
    resolve_kind,
)

__all__ = [
    "Document",
    "DocumentError",
    "Settings",
    "DEFAULT_SETTINGS",
    "DEFAULT_TEMPLATE_NAME",
    "ElementKind",
    "TYPE_ALIASES",
    "child_list",
    "element_type",
    "first_value",
    "resolve_kind",
]
