# =============================================================================
# Mailsmith: Email-Safe Newsletter Rendering
# =============================================================================
#
# Mailsmith turns declarative newsletter templates (the JSON a drag-and-drop
# editor saves) into HTML that survives real mail clients, plus the
# plain-text alternative that goes with it.
#
# Features:
#   - Table-based layout and inline styles throughout
#   - Outlook conditional fixes and a mobile media query
#   - Forgiving element handling (aliases, unknown types, bad nodes)
#   - Plain-text alternative and terminal preview
#   - XDG Base Directory compliant configuration
#
# =============================================================================

__version__ = "0.1.0"
__app_name__ = "mailsmith"

# Main entry point - this is what gets called by the 'mailsmith' command
from mailsmith.app import main

__all__ = ["main", "__version__", "__app_name__"]
