"""Application-wide constants for SpectrogramViewer.

The viewer has no user-facing settings; window geometry, colours and
shortcuts are fixed here.
"""

# Window geometry. The source raster is generated at the same size, so
# window pixels and source pixels correspond 1:1.
WINDOW_WIDTH = 640
WINDOW_HEIGHT = 480
WINDOW_TITLE = "spectrogram"

# Selection overlay colour (RGBA)
HIGHLIGHT_COLOR = (0, 102, 204, 200)
CLEAR_COLOR = (0, 0, 0, 255)

# Constant luma of the synthetic gradient image
GRADIENT_LUMA = 128

# Keyboard shortcuts
RESET_SHORTCUT = "Ctrl+0"
QUIT_SHORTCUT = "Esc"
HELP_SHORTCUT = "F1"
