# =============================================================================
# Result Envelopes
# =============================================================================
# Rendering never raises past the public API. Every entry point returns one
# of these envelopes instead; the caller decides what to do with a failure.
#
# to_dict() produces the JSON shape the rest of the service layer expects:
#
#   {"success": True, "html": "..."}
#   {"success": False, "message": "...", "error": <exception>}
#   {"valid": False, "error": "..."}
# =============================================================================

from dataclasses import dataclass
from typing import Any


@dataclass
class HtmlResult:
    """
    Result of rendering a document to HTML.

    Attributes:
        html: The complete HTML document ("" on failure).
        message: Human-readable failure message.
        error: The exception that caused the failure.
    """
    html: str = ""
    message: str | None = None
    error: BaseException | None = None

    @property
    def success(self) -> bool:
        """Returns True if rendering succeeded."""
        return self.error is None

    def to_dict(self) -> dict[str, Any]:
        if self.success:
            return {"success": True, "html": self.html}
        return {"success": False, "message": self.message, "error": self.error}


@dataclass
class TextResult:
    """
    Result of extracting the plain-text version of a document.

    Attributes:
        text: The plain-text body ("" on failure).
        message: Human-readable failure message.
        error: The exception that caused the failure.
    """
    text: str = ""
    message: str | None = None
    error: BaseException | None = None

    @property
    def success(self) -> bool:
        """Returns True if extraction succeeded."""
        return self.error is None

    def to_dict(self) -> dict[str, Any]:
        if self.success:
            return {"success": True, "text": self.text}
        return {"success": False, "message": self.message, "error": self.error}


@dataclass
class ValidationResult:
    """Outcome of the pre-flight shape check."""
    valid: bool
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        if self.valid:
            return {"valid": True}
        return {"valid": False, "error": self.error}
