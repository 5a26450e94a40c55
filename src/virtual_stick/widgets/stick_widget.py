from __future__ import annotations
from typing import Optional

# Qt
from python_qt_binding.QtCore import Qt, QEvent, QPointF, QRectF, pyqtSignal
from python_qt_binding.QtGui import QBrush, QColor, QPainter
from python_qt_binding.QtWidgets import QWidget

from ..config_manager import StickConfig
from ..events import UpdateEmitter
from ..geometry import PointerSample, PointerSource, first_touch
from ..input_surface import ListenerSurface, SampleKind
from ..session import StickSession, StickSnapshot
from ..throttle import Clock


DISABLED_ALPHA = 90


class StickWidget(QWidget):
    """
    Qt front end for a StickSession.
    - Paints the base and the stick from session snapshots.
    - Feeds mouse/touch input to the session through its own input surface.
    - Re-emits start/move/stop notifications as Qt signals.
    """

    # Signals carry UpdateEvent instances
    started = pyqtSignal(object)
    moved = pyqtSignal(object)
    stopped = pyqtSignal(object)

    def __init__(self, config: Optional[StickConfig] = None, clock: Optional[Clock] = None, parent=None) -> None:
        super().__init__(parent)

        self._surface = ListenerSurface()
        emitter = UpdateEmitter(
            on_start=self.started.emit,
            on_move=self.moved.emit,
            on_stop=self.stopped.emit,
        )
        self._session = StickSession(config or StickConfig(), emitter, self._surface, clock=clock)

        self.setAttribute(Qt.WA_AcceptTouchEvents, True)
        self._apply_size()

    # ---- public api ----
    def session(self) -> StickSession:
        return self._session

    def get_config(self) -> StickConfig:
        return self._session.get_config()

    def set_config(self, cfg: StickConfig) -> None:
        self._session.set_config(cfg)
        self._apply_size()
        self.update()

    def set_disabled(self, disabled: bool) -> None:
        self._session.set_disabled(disabled)
        self.update()

    def snapshot(self) -> StickSnapshot:
        return self._session.snapshot()

    def shutdown(self) -> None:
        self._session.cancel()

    def closeEvent(self, event) -> None:  # noqa: D401 - Qt signature
        self.shutdown()
        super().closeEvent(event)

    # ---- painting ----
    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)

        cfg = self._session.get_config()
        snap = self._session.snapshot()
        self._draw_base(painter, cfg, snap)
        self._draw_stick(painter, cfg, snap)

    def _draw_base(self, painter: QPainter, cfg: StickConfig, snap: StickSnapshot) -> None:
        painter.save()
        painter.setPen(Qt.NoPen)
        painter.setBrush(QBrush(self._color(cfg.base_color, snap.disabled)))
        painter.drawEllipse(QRectF(0.0, 0.0, cfg.size, cfg.size))
        painter.restore()

    def _draw_stick(self, painter: QPainter, cfg: StickConfig, snap: StickSnapshot) -> None:
        painter.save()

        center_x = cfg.radius
        center_y = cfg.radius
        if snap.dragging and snap.vector is not None:
            center_x += snap.vector.relative_x
            center_y += snap.vector.relative_y

        stick_radius = cfg.stick_size / 2.0
        painter.setPen(Qt.NoPen)
        painter.setBrush(QBrush(self._color(cfg.stick_color, snap.disabled)))
        painter.drawEllipse(QPointF(center_x, center_y), stick_radius, stick_radius)

        painter.restore()

    @staticmethod
    def _color(name: str, disabled: bool) -> QColor:
        color = QColor(name)
        if disabled:
            color.setAlpha(DISABLED_ALPHA)
        return color

    # ---- mouse ----
    def mousePressEvent(self, e) -> None:
        if e.button() == Qt.LeftButton:
            self._session.press(self._mouse_sample(e), 0.0, 0.0)
            self.update()

    def mouseMoveEvent(self, e) -> None:
        self._surface.dispatch(SampleKind.MOUSE_MOVE, self._mouse_sample(e))
        self.update()

    def mouseReleaseEvent(self, e) -> None:
        if e.button() == Qt.LeftButton:
            self._surface.dispatch(SampleKind.MOUSE_UP, self._mouse_sample(e))
            self.update()

    # ---- touch ----
    def event(self, e) -> bool:
        kind = e.type()
        if kind in (QEvent.TouchBegin, QEvent.TouchUpdate, QEvent.TouchEnd, QEvent.TouchCancel):
            sample = first_touch([(p.pos().x(), p.pos().y()) for p in e.touchPoints()])
            if kind == QEvent.TouchBegin:
                if sample is not None:
                    self._session.press(sample, 0.0, 0.0)
            elif kind == QEvent.TouchUpdate:
                self._surface.dispatch(SampleKind.TOUCH_MOVE, sample)
            else:
                self._surface.dispatch(SampleKind.TOUCH_END, sample)
            e.accept()
            self.update()
            return True
        return super().event(e)

    # ---- internal helpers ----
    def _apply_size(self) -> None:
        side = int(round(self._session.get_config().size))
        self.setFixedSize(side, side)

    @staticmethod
    def _mouse_sample(e) -> PointerSample:
        pos = e.pos()
        return PointerSample(float(pos.x()), float(pos.y()), PointerSource.MOUSE)
