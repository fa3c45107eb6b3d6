MAX_LEVEL = 30

# Pair count starts at BASE_PAIRS and grows by one per level until MAX_PAIRS.
BASE_PAIRS = 4
MAX_PAIR_GROWTH = 11
MAX_PAIRS = 15

# Timing hints in seconds (owned by the caller, never enforced by the engine).
REVEAL_DURATION = 4.0
EVALUATION_PAUSE = 0.1
MISMATCH_DISPLAY_DURATION = 1.5
COMPLETION_PAUSE = 1.0
HINT_FLASH_DURATION = 0.8

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
WINDOW_TITLE = "Concentration"

# Board footprint relative to window (percentage of window width/height).
BOARD_MAX_WIDTH_PCT = 0.92
BOARD_MAX_HEIGHT_PCT = 0.85
# Strip above the board reserved for the level label and hint button.
HEADER_HEIGHT = 60
# Gap between tiles and around the board edge.
TILE_SPACING = 12
