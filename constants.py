# constants.py

# =============================================================================
# --- GRADIENT FIELD ---
# =============================================================================
BOX_SIDE_LENGTH = 8 # Side of the sampled box in grid units. The lattice holds (N+1)x(N+1) gradients.
MIN_BOX_SIDE_LENGTH = 1
GRADIENT_NOISE_SEED = 24322
UNIT_LENGTH_TOLERANCE = 1e-6 # Allowed deviation of a gradient's magnitude from 1.
GRADIENT_DIMENSIONS = 2

# =============================================================================
# --- SAMPLING & COLORING ---
# =============================================================================
SAMPLE_STEP_SIZE = 0.05 # Distance between two sample points, in box units.
COLOR_CHANNEL_MAX = 255
# The preview keeps red saturated and drives green/blue from the noise,
# sampled at (i, j) and at the transposed point (j, i).
PREVIEW_RED_CHANNEL = 1.0
UI_LOADING_BAR_UPDATE_INTERVAL = 25 # Redraw the loading bar every N sample columns.

# =============================================================================
# --- DISPLAY & CAMERA ---
# =============================================================================
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 800
CLOCK_TICK_RATE = 60
WINDOW_CAPTION = "Gradient Noise Box"
CAMERA_DEFAULT_ZOOM = 90.0 # Pixels per world unit.
CAMERA_PANSPEED_PIXELS = 15
CAMERA_ZOOM_SPEED = 0.1
CAMERA_MAX_ZOOM = 800.0
CAMERA_MIN_ZOOM = 10.0
BOX_BORDER_WIDTH_PIXELS = 1

# =============================================================================
# --- UI & COLORS ---
# =============================================================================
UI_FONT_SIZE = 28
UI_HUD_POS_X = 10
UI_HUD_POS_Y = 10
UI_LOADING_TEXT_OFFSET_Y = 50
UI_LOADING_BAR_WIDTH = 400
UI_LOADING_BAR_HEIGHT = 30
COLOR_WHITE = (255, 255, 255); COLOR_BLACK = (0, 0, 0); COLOR_VOID = (10, 0, 20)
COLOR_LOADING_BAR_BG = (50, 50, 50); COLOR_LOADING_BAR_FG = (100, 200, 100)

# =============================================================================
# --- DIAGNOSTICS ---
# =============================================================================
PROFILER_PRINT_LINE_COUNT = 20
