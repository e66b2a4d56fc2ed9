# constants.py

# =============================================================================
# --- NOISE ENGINE ---
# =============================================================================
PERMUTATION_SIZE = 256
PERMUTATION_MASK = PERMUTATION_SIZE - 1
GRADIENT_HASH_MASK = 15 # Low 4 bits of a corner hash pick the gradient.
# Coordinates are clamped into the 32-bit range before flooring to a cell index.
INT32_MIN = -2147483648
INT32_MAX = 2147483647
NOISE_EXPECTED_MIN = -1.0
NOISE_EXPECTED_MAX = 1.0

# =============================================================================
# --- RASTER ---
# =============================================================================
PIXEL_MAX = 255
GOLDEN_IMAGE_SIZE = 32
GOLDEN_CELL_SIZE = 4.0

# =============================================================================
# --- PLOTS ---
# =============================================================================
PROFILE_SAMPLES = 512
HISTOGRAM_BINS = 64
PLOT_DPI = 100
PLOT_FIGSIZE = (8, 4)
PLOT_LINE_COLOR = "tab:blue"
PLOT_BOUND_COLOR = "tab:red"

# =============================================================================
# --- PREVIEW: TIME, CAMERA & UI ---
# =============================================================================
CLOCK_TICK_RATE = 30
MILLISECONDS_PER_SECOND = 1000.0
MAX_FRAME_DELTA_SECONDS = 0.25
# Lattice cells of z travelled per real second at each speed level.
TIME_MULTIPLIERS = {
    0: 0.0625,
    1: 0.125,
    2: 0.25,
    3: 0.5,
    4: 1.0,
    5: 2.0
}
DEFAULT_SPEED_LEVEL = 2

SCREEN_WIDTH = 512
SCREEN_HEIGHT = 512
# Preview renders at a lower resolution and is scaled up to the window.
PREVIEW_DOWNSAMPLE = 4
CAMERA_START_X = 0.0
CAMERA_START_Y = 0.0
CAMERA_START_ZOOM = 32.0 # Screen pixels per lattice cell.
CAMERA_PANSPEED_PIXELS = 8
CAMERA_ZOOM_SPEED = 0.1
CAMERA_MAX_ZOOM = 256.0
CAMERA_MIN_ZOOM = 2.0

SCREENSHOT_DIR = "screenshots"

COLOR_WHITE = (255, 255, 255); COLOR_BLACK = (0, 0, 0)
UI_FONT_SIZE = 24
UI_HUD_POS_X = 10
UI_HUD_POS_Y = 10
