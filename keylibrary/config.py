import os

# =============================================================================
# GENERAL SETTINGS
# =============================================================================

# Verbose logging (set by --debug or KEYLIBRARY_DEBUG=1)
DEBUG_MODE = os.environ.get("KEYLIBRARY_DEBUG", "").strip().lower() in {"1", "true", "yes", "on"}

# Allow more than one label per key by default
DEFAULT_MULTI = False

# =============================================================================
# UI STRINGS
# =============================================================================

WINDOW_TITLE = "KeyLibrary"
SELECTION_TITLE_PREFIX = "Selection Mode: "
DEFAULT_KEY_TEXT = "Press a key"
GO_BUTTON_TEXT = "Go"

DEMO_TITLE = "KeyLibrary Demo"
DEMO_HEADER_TEXT = "KEYLIBRARY DEMO"
DEMO_CHECKOUT_PROMPT = "enter string to checkout"
DEMO_RETURN_PROMPT = "enter string to return"

# =============================================================================
# UI SETTINGS
# =============================================================================

# Width the keyboard image is scaled to (pixels), aspect ratio preserved
KEYBOARD_WIDTH = 800

# Info pane (current key + label list)
INFO_PANE_WIDTH = 150
CURRENT_KEY_FONT_SIZE = 24
UI_PANE_GAP = 10  # Horizontal gap between keyboard and info pane (pixels)

# Drawn keyboard (used when no image assets are configured)
KEYCAP_UNIT = 48      # Size of a 1u keycap (pixels)
KEYCAP_SPACING = 4    # Gap between keycaps (pixels)
KEYCAP_RADIUS = 6

# Demo window
DEMO_WINDOW_WIDTH = 400
DEMO_WINDOW_HEIGHT = 400
DEMO_HEADER_FONT_SIZE = 40
DEMO_GRID_GAP = 20

# =============================================================================
# COLORS
# =============================================================================

KEYLIBRARY_COLORS = {
    "bg_main": "#212529",
    "bg_card": "#17191d",
    "bg_hover": "#3f3f46",
    "text_main": "#f4f4f5",
    "text_sub": "#a1a1aa",
    "border": "#3f3f46",
    "btn_bg": "#27272a",
    "keycap": "#27272a",
    "occupied": "#3b82f6",
    "occupied_text": "#ffffff",
    "current": "#f97316",
}

# =============================================================================
# RESOURCE SETTINGS
# =============================================================================

KEYS_FILE_NAME = "keys.txt"
KEYBOARD_IMAGE_NAME = "keyboard.png"
KEY_IMAGE_EXTENSION = ".png"

# Environment overrides for resource locations
KEYS_FILE_ENV = "KEYLIBRARY_KEYS_FILE"
ASSET_DIR_ENV = "KEYLIBRARY_ASSET_DIR"
