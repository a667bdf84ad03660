"""Fixed settings for the particle-in-a-box page."""

# ---------------- Sampling ----------------
NUM_POINTS = 200          # grid intervals -> NUM_POINTS + 1 samples
DEFAULT_LENGTH = 1.0
LEVEL_MIN = 1
LEVEL_MAX = 10
DEFAULT_LEVEL = 1

# ---------------- Axes ----------------
AXIS_MARGIN = 1.1
X_TICK_DIVISIONS = 10

# ---------------- Page / chart ----------------
PAGE_TITLE = "Particle in a Box — Wave Pattern Visualizer"
CHART_HEIGHT = 520
WAVE_COLOR = "rgb(54, 162, 235)"
DENSITY_COLOR = "rgb(255, 99, 132)"
DENSITY_FILL = "rgba(255, 99, 132, 0.3)"
