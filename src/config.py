"""
Timeline SVG Configuration
"""

# Canvas settings
DEFAULT_WIDTH = 1200
DEFAULT_HEIGHT = 600

# Layout (pixels)
MARGIN_TOP = 60
MARGIN_BOTTOM = 40
MARGIN_LEFT = 100
MARGIN_RIGHT = 40
RULER_HEIGHT = 40
TRACK_HEIGHT = 80       # Nominal lane height, also the upper clamp
MIN_TRACK_HEIGHT = 40
TRACK_LABEL_GAP = 10    # Distance between track label and content area
MIN_CLIP_WIDTH = 5      # Keeps zero/very short items visible
CLIP_PADDING = 2        # Inset above and below clips/gaps/transitions
CLIP_LABEL_MIN_WIDTH = 30
TRANSITION_STROKE_WIDTH = 3

# Color scheme
VIDEO_TRACK_COLOR = "#4A90E2"
AUDIO_TRACK_COLOR = "#50C878"
TRACK_BG_ALPHA = "33"   # Appended to the track color for the lane background
GAP_COLOR = "#E0E0E0"
GAP_STROKE_COLOR = "#999"
CLIP_STROKE_COLOR = "#333"
TRANSITION_COLOR = "#FFB84D"
GRID_COLOR = "#CCCCCC"
TRACK_LABEL_BG = "#F5F5F5"

# Ruler settings
RULER_INTERVALS = (0.1, 0.5, 1, 2, 5, 10, 15, 30, 60, 120, 300, 600, 1800, 3600)
RULER_TARGET_MARKS = 12
