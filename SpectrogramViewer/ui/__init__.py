"""UI components package."""

from .viewer import ViewerWindow
from .canvas import CanvasWidget, QtSurface
from .dialogs import HelpDialog

__all__ = ["ViewerWindow", "CanvasWidget", "QtSurface", "HelpDialog"]
