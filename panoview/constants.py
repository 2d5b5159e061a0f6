
# Window Configuration
WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720
WINDOW_TITLE = "Panorama Viewer"

# Scene Geometry
RADIUS = 10.0
SPHERE_SEGMENTS = 300
TUBE_HEIGHT_SEGMENTS = 50
TUBE_RADIAL_SEGMENTS = 300
Z_NEAR = 0.1
Z_FAR = 100.0

# Camera Defaults
DEFAULT_VFOV = 80.0
DEFAULT_START_ANGLE = 0.0
PITCH_LIMIT = 1.1  # radians

# Controls
PAN_SPEED = (0.005, 0.005)
ZOOM_MIN = 1.0
ZOOM_MAX = 4.0
ZOOM_STEP = 0.1
FOV_MIN = 20.0  # exclusive
FOV_MAX = 80.0  # exclusive

# Compass Overlay
COMPASS_SIZE = 96
COMPASS_MARGIN = 16
COMPASS_RING_INSET = 2.0
COMPASS_RING_WIDTH = 2.0
COMPASS_SLICE_INSET = 6.0
COMPASS_SLICE_COLOR = (1.0, 0.0, 0.0, 1.0)
COMPASS_RING_COLOR = (0.0, 1.0, 0.0, 1.0)
COMPASS_BG_COLOR = (0.0, 0.0, 0.0, 1.0)
COMPASS_CIRCLE_STEPS = 64
