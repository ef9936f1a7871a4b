# =============================================================================
# Rendering Defaults
# =============================================================================
# Every literal default the renderers fall back on lives here, so the
# button label or divider color can't drift between call sites.
#
# Page-level defaults (background, width, font, padding) live on
# mailsmith.core.document.Settings and can be overridden from config.toml.
# =============================================================================

# Text / heading / paragraph / title
TEXT_TAG = "p"

# Image
IMAGE_ALT = "Image"

# Button
BUTTON_HREF = "#"
BUTTON_LABEL = "Click here"

# Divider (used when the element has no styles of its own)
DIVIDER_STYLES = {
    "borderTop": "1px solid #e0e0e0",
    "margin": "20px 0",
}

# Spacer height in pixels
SPACER_HEIGHT = 20

# Social icons
SOCIAL_ICON_SIZE = 32               # Icon width/height in pixels
SOCIAL_SPACING = 10                 # Horizontal cell padding in pixels
SOCIAL_HREF = "#"

# Nesting deeper than this renders to nothing (templates are assumed acyclic,
# this keeps malformed input from recursing without bound)
MAX_DEPTH = 64
