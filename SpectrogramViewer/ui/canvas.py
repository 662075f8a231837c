"""Canvas widget that displays the source image and handles drag selection.

CanvasWidget owns no state of its own: mouse events are forwarded to the
ViewTracker and painting is delegated to the ViewRenderer through a
QtSurface.
"""

from typing import Optional

from PySide6.QtCore import QRect, QRectF, QSize, Qt, Signal
from PySide6.QtGui import QColor, QImage, QPainter
from PySide6.QtWidgets import QWidget

from ..core.constants import CLEAR_COLOR
from ..core.region import Rect
from ..core.renderer import ViewRenderer
from ..core.tracker import ViewTracker


def _qrect(rect: Rect) -> QRect:
    return QRect(rect.left, rect.top, rect.width, rect.height)


class QtSurface:
    """Surface implementation drawing onto an active QPainter.

    Args:
        painter: Active painter for the target device
        image: Source image used by ``blit``
        size: Size of the target area (the whole window)
    """

    def __init__(self, painter: QPainter, image: QImage, size: QSize):
        self.painter = painter
        self.image = image
        self.target = QRect(0, 0, size.width(), size.height())
        self._color = QColor(*CLEAR_COLOR)

    def clear(self) -> None:
        self.painter.fillRect(self.target, QColor(*CLEAR_COLOR))

    def blit(self, src: Optional[Rect], dst: Optional[Rect]) -> None:
        source = self.image.rect() if src is None else _qrect(src)
        target = self.target if dst is None else _qrect(dst)
        self.painter.drawImage(QRectF(target), self.image, QRectF(source))

    def set_draw_color(self, rgba: tuple[int, int, int, int]) -> None:
        self._color = QColor(*rgba)

    def fill_rect(self, rect: Rect) -> None:
        # fillRect composites with SourceOver, so the colour's alpha blends
        self.painter.fillRect(_qrect(rect), self._color)

    def present(self) -> None:
        self.painter.end()


class CanvasWidget(QWidget):
    """Fixed-size widget showing the current view.

    Left-drag selects a region; releasing the button zooms into it.

    Signals:
        state_changed: Selection or viewport changed
        pointer_moved(int, int): Pointer position in canvas coordinates
        pointer_left: Pointer left the canvas

    Raises:
        RuntimeError: If ``image`` is null.
    """

    state_changed = Signal()
    pointer_moved = Signal(int, int)
    pointer_left = Signal()

    def __init__(self, tracker: ViewTracker, renderer: ViewRenderer, image: QImage, parent=None):
        super().__init__(parent)
        if image.isNull():
            raise RuntimeError("Failed to create source image for the canvas")
        self.tracker = tracker
        self.renderer = renderer
        self._image = image
        self.setFixedSize(renderer.bounds.width, renderer.bounds.height)
        self.setMouseTracking(True)
        self.setAttribute(Qt.WA_OpaquePaintEvent)

    def _apply(self, changed: bool):
        # update() is coalesced by Qt into a single paint per loop iteration
        if changed:
            self.update()
            self.state_changed.emit()

    def reset_view(self):
        """Show the full image again."""
        self._apply(self.tracker.on_reset_shortcut())

    def mousePressEvent(self, ev):
        if ev.button() != Qt.LeftButton:
            ev.ignore()
            return
        p = ev.position().toPoint()
        self._apply(self.tracker.on_pointer_down(p.x(), p.y()))

    def mouseMoveEvent(self, ev):
        p = ev.position().toPoint()
        self.pointer_moved.emit(p.x(), p.y())
        # Mouse tracking delivers moves without a button; only a held left button drags
        if ev.buttons() & Qt.LeftButton:
            self._apply(self.tracker.on_pointer_move(p.x(), p.y()))

    def leaveEvent(self, event):
        self.pointer_left.emit()
        super().leaveEvent(event)

    def mouseReleaseEvent(self, ev):
        if ev.button() != Qt.LeftButton:
            ev.ignore()
            return
        p = ev.position().toPoint()
        self._apply(self.tracker.on_pointer_up(p.x(), p.y()))

    def paintEvent(self, event):
        painter = QPainter(self)
        self.renderer.render(self.tracker, QtSurface(painter, self._image, self.size()))
