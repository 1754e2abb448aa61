"""PyQt6 widgets that place and paint balloon tooltips."""
from __future__ import annotations

import logging
import math
from typing import Optional

from PyQt6.QtCore import QEvent, QObject, QPoint, QPointF, QRect, QRectF, Qt
from PyQt6.QtGui import QColor, QPainter, QPainterPath
from PyQt6.QtWidgets import QWidget

from tooltip_kit.balloon_shape import BalloonPath
from tooltip_kit.configuration import DEFAULT_TINT_COLOR, TooltipConfiguration
from tooltip_kit.geometry import Point, Rect
from tooltip_kit.layout import TooltipLayout, compute_attached_layout, compute_view_layout, point_source_rect
from tooltip_kit.logging_utils import QT_LOGGER_NAME
from tooltip_kit.path_renderer import PathPainterAdapter, render_path

_QT_LOGGER = logging.getLogger(QT_LOGGER_NAME)

CONTENT_PADDING = 2


class QPainterPathAdapter(PathPainterAdapter):
    def __init__(self, path: Optional[QPainterPath] = None) -> None:
        self.path = path if path is not None else QPainterPath()

    def add_rounded_rect(self, x: float, y: float, width: float, height: float, radius: float) -> None:
        self.path.addRoundedRect(QRectF(x, y, width, height), radius, radius)

    def move_to(self, x: float, y: float) -> None:
        self.path.moveTo(QPointF(x, y))

    def line_to(self, x: float, y: float) -> None:
        self.path.lineTo(QPointF(x, y))


def build_qpainter_path(path: BalloonPath, *, offset_x: float = 0.0, offset_y: float = 0.0) -> QPainterPath:
    """Combine the rounded body and the arrow notch into one fillable path."""
    adapter = QPainterPathAdapter()
    adapter.path.setFillRule(Qt.FillRule.WindingFill)
    render_path(adapter, path, offset_x=offset_x, offset_y=offset_y)
    return adapter.path


def resolve_tint(color: object) -> QColor:
    if isinstance(color, QColor):
        return QColor(color)
    q_color = QColor(str(color))
    if not q_color.isValid():
        _QT_LOGGER.debug("Invalid tint colour %r; using %s", color, DEFAULT_TINT_COLOR)
        q_color = QColor(DEFAULT_TINT_COLOR)
    return q_color


class TooltipWidget(QWidget):
    """Standalone balloon drawn over ``host`` and anchored at a source rect origin.

    The host rect serves as the screen bounds. Call ``set_source_rect`` or
    ``set_source_point`` whenever the anchor moves; host resizes relayout
    automatically.
    """

    def __init__(
        self,
        host: QWidget,
        configuration: TooltipConfiguration,
        content: Optional[QWidget] = None,
        *,
        hidden: bool = False,
    ) -> None:
        super().__init__(host)
        self._host = host
        self._configuration = configuration
        self._content = content
        self._hidden = hidden
        self._source_rect: Optional[Rect] = None
        self._layout: Optional[TooltipLayout] = None
        # Painting happens inside a margin so an outward notch is never clipped.
        self._margin = 0
        self.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents, True)
        self.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground, True)
        if content is not None:
            content.setParent(self)
        host.installEventFilter(self)
        self.setVisible(False)

    @property
    def configuration(self) -> TooltipConfiguration:
        return self._configuration

    @property
    def tooltip_layout(self) -> Optional[TooltipLayout]:
        return self._layout

    @property
    def is_hidden(self) -> bool:
        return self._hidden

    def set_hidden(self, hidden: bool) -> None:
        self._hidden = hidden
        self.relayout()

    def set_source_rect(self, rect: Rect) -> None:
        self._source_rect = rect
        self.relayout()

    def set_source_point(self, point: Point) -> None:
        self.set_source_rect(point_source_rect(point))

    def screen_bounds(self) -> Rect:
        return Rect(0.0, 0.0, float(self._host.width()), float(self._host.height()))

    def _compute_layout(self, source_rect: Rect, screen_bounds: Rect) -> TooltipLayout:
        return compute_view_layout(self._configuration, source_rect, screen_bounds)

    def relayout(self) -> Optional[TooltipLayout]:
        if self._hidden or self._source_rect is None:
            self._layout = None
            self.setVisible(False)
            return None
        layout = self._compute_layout(self._source_rect, self.screen_bounds())
        self._layout = layout
        self._margin = int(math.ceil(max(self._configuration.arrow_height, 0.0)))
        frame = layout.frame
        left = int(math.floor(frame.x)) - self._margin
        top = int(math.floor(frame.y)) - self._margin
        width = int(math.ceil(frame.width)) + self._margin * 2
        height = int(math.ceil(frame.height)) + self._margin * 2
        self.setGeometry(QRect(left, top, width, height))
        if self._content is not None:
            card = layout.card_rect
            self._content.setGeometry(
                QRect(
                    int(round(card.x)) + self._margin + CONTENT_PADDING,
                    int(round(card.y)) + self._margin + CONTENT_PADDING,
                    max(0, int(round(card.width)) - CONTENT_PADDING * 2),
                    max(0, int(round(card.height)) - CONTENT_PADDING * 2),
                )
            )
        _QT_LOGGER.debug(
            "Tooltip relayout: source=%s frame=%s direction=%s position=%s",
            self._source_rect.to_tuple(),
            frame.to_tuple(),
            layout.direction.value,
            layout.position.value,
        )
        self.setVisible(True)
        self.raise_()
        self.update()
        return layout

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:  # type: ignore[override]
        if watched is self._host and event.type() == QEvent.Type.Resize:
            self.relayout()
        return super().eventFilter(watched, event)

    def paintEvent(self, event) -> None:  # type: ignore[override]
        layout = self._layout
        if layout is None:
            return
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(resolve_tint(self._configuration.tint_color))
        painter.drawPath(build_qpainter_path(layout.outline, offset_x=self._margin, offset_y=self._margin))
        card = layout.card_rect
        radius = layout.card_corner_radius
        painter.setBrush(QColor("white"))
        painter.drawRoundedRect(
            QRectF(card.x + self._margin, card.y + self._margin, card.width, card.height),
            radius,
            radius,
        )
        painter.end()


class AttachedTooltip(TooltipWidget):
    """Balloon that follows a source widget, drawn over the source's window."""

    def __init__(
        self,
        source: QWidget,
        configuration: TooltipConfiguration,
        content: Optional[QWidget] = None,
        *,
        host: Optional[QWidget] = None,
        hidden: bool = True,
    ) -> None:
        super().__init__(host if host is not None else source.window(), configuration, content, hidden=hidden)
        self._source = source
        source.installEventFilter(self)
        self._source_rect = self._source_rect_in_host()

    def _source_rect_in_host(self) -> Rect:
        top_left = self._source.mapTo(self._host, QPoint(0, 0))
        return Rect(
            float(top_left.x()),
            float(top_left.y()),
            float(self._source.width()),
            float(self._source.height()),
        )

    def _compute_layout(self, source_rect: Rect, screen_bounds: Rect) -> TooltipLayout:
        return compute_attached_layout(self._configuration, source_rect, screen_bounds)

    def relayout(self) -> Optional[TooltipLayout]:
        self._source_rect = self._source_rect_in_host()
        return super().relayout()

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:  # type: ignore[override]
        if watched is getattr(self, "_source", None) and event.type() in (QEvent.Type.Move, QEvent.Type.Resize):
            self.relayout()
        return super().eventFilter(watched, event)
