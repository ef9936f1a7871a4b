# =============================================================================
# Mailsmith Entry Point for `python -m mailsmith`
# =============================================================================
# This module allows Mailsmith to be run as a Python module:
#
#   python -m mailsmith template.json
#
# This is equivalent to running the 'mailsmith' command after installation.
# =============================================================================

import sys

from mailsmith.app import main

if __name__ == "__main__":
    sys.exit(main())
