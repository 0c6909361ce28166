"""
Constants and configuration values for Paint Bucket.

This module centralizes all constant values, magic numbers, and
configuration settings used throughout the application.
"""

# Channel limits
CHANNEL_MIN = 0
CHANNEL_MAX = 255
MAX_PIXEL_DIFF = 4 * CHANNEL_MAX

# Packed pixel layout (alpha in the highest byte, then red, green, blue)
ALPHA_SHIFT = 24
RED_SHIFT = 16
GREEN_SHIFT = 8
BLUE_SHIFT = 0
CHANNEL_MASK = 0xFF

# Fill defaults
DEFAULT_TOLERANCE = 0
DEFAULT_ANTIALIAS = False

# Host color models (Pillow image modes)
COLOR_MODE_GRAYSCALE = "L"
COLOR_MODE_GRAYSCALE_ALPHA = "LA"
COLOR_MODE_RGB = "RGB"
COLOR_MODE_RGBA = "RGBA"
BUFFER_IMAGE_MODE = COLOR_MODE_RGBA

# File naming
OUTPUT_FILE_PREFIX = "filled_"
DEFAULT_OUTPUT_FORMAT = "PNG"

# Node types
NODE_TYPE_FLOOD_FILL = "Flood Fill"

# Change mask colors
MASK_CHANGED_COLOR = (255, 255, 255, 255)
MASK_UNCHANGED_COLOR = (0, 0, 0, 255)
