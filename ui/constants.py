'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''

# Row layout (demo view)
INDENT_W = 16
GUTTER_W = 12
PADDING = 4
DEFAULT_ROW_H = 24

# Drop-zone classification
DEFAULT_DIVISIONS = 3

# Cascading expand while hovering a collapsed row
EXPAND_DELAY_MS = 1000

# Auto-scroll edge bands
SCROLL_BAND_PX = 50
SCROLL_MIN_STEP_PX = 2
SCROLL_MAX_STEP_PX = 20
SCROLL_FRAME_MS = 16  # ~60fps
