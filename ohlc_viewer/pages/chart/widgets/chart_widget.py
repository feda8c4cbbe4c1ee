"""
Candlestick Chart Widget

Hosts the chart scene in a pyqtgraph GraphicsView. The view keeps its
default 1:1 pixel mapping, so scene coordinates are widget pixels with the
origin at the top-left corner.
"""

import time
from typing import Optional, Sequence, Tuple

import pyqtgraph as pg
from PyQt6.QtCore import QLineF, QPointF, QRectF
from PyQt6.QtGui import QFont, QFontMetricsF, QPainter, QPicture

from ohlc_viewer.chart.config import ChartConfig, DEFAULT_CONFIG
from ohlc_viewer.chart.layout import NoDataError, empty_scene, layout
from ohlc_viewer.chart.types import AxisLabel, Bar, Line, Scene, Size
from ohlc_viewer.utilities.logger import chart_logger


def _qline(line: Line) -> QLineF:
    return QLineF(line.start.x, line.start.y, line.end.x, line.end.y)


class SceneItem(pg.GraphicsObject):
    """Records a Scene into a QPicture and replays it on paint"""

    def __init__(self, scene: Scene, font: QFont):
        super().__init__()
        self.chart_scene = scene
        self.label_font = font
        self.picture = QPicture()
        self.generate_picture()

    def set_scene(self, scene: Scene):
        self.prepareGeometryChange()
        self.chart_scene = scene
        self.generate_picture()
        self.update()

    def generate_picture(self):
        scene = self.chart_scene
        self.picture = QPicture()
        painter = QPainter(self.picture)
        try:
            foreground_pen = pg.mkPen(scene.foreground.hex, width=1)

            painter.setPen(foreground_pen)
            for axis in scene.axes:
                painter.drawLine(_qline(axis))

            for tick in scene.ticks:
                painter.drawLine(_qline(tick.line))

            # Wicks first so the bodies cover them
            for candle in scene.candles:
                painter.drawLine(_qline(candle.wick))

            for candle in scene.candles:
                body = candle.body
                painter.fillRect(QRectF(body.x, body.y, body.width, body.height).normalized(),
                                 pg.mkBrush(candle.color.hex))

            painter.setFont(self.label_font)
            metrics = QFontMetricsF(self.label_font)
            for label in scene.labels():
                self._draw_label(painter, metrics, label)
        finally:
            painter.end()

    @staticmethod
    def _draw_label(painter: QPainter, metrics: QFontMetricsF, label: AxisLabel):
        top = label.position.y
        if label.anchor != 'top_left':
            top -= metrics.height() / 2.0
        painter.drawText(QPointF(label.position.x, top + metrics.ascent()), label.text)

    def paint(self, painter, option, widget=None):
        painter.drawPicture(0, 0, self.picture)

    def boundingRect(self):
        return QRectF(self.picture.boundingRect())


class ChartWidget(pg.GraphicsView):
    """Candlestick chart that re-lays itself out on every data or size change"""

    def __init__(self, config: Optional[ChartConfig] = None, parent=None):
        config = config or DEFAULT_CONFIG
        super().__init__(parent, background=config.background.hex)
        self.config = config
        self.setAntialiasing(False)
        self.setMinimumSize(100, 100)

        self.bars: Tuple[Bar, ...] = ()
        self.chart_font = QFont(self.config.font_family)
        self.chart_font.setPixelSize(int(self.config.font_size))
        self.chart_font.setStyleHint(QFont.StyleHint.SansSerif)

        self.scene_item = SceneItem(empty_scene(self.canvas_size(), self.config), self.chart_font)
        self.addItem(self.scene_item)

    def canvas_size(self) -> Size:
        return Size(float(self.width()), float(self.height()))

    @property
    def current_scene(self) -> Scene:
        return self.scene_item.chart_scene

    def set_bars(self, bars: Sequence[Bar]):
        """Replace the chart data. ``bars`` must be newest first."""
        self.bars = tuple(bars)
        chart_logger.ui_operation("Chart data updated", f"{len(self.bars)} bars")
        self.refresh()

    def refresh(self):
        """Run one layout pass for the current data and size."""
        start_time = time.perf_counter()
        size = self.canvas_size()
        try:
            scene = layout(self.bars, size, self.config)
        except NoDataError as e:
            chart_logger.debug(f"Nothing to render: {e}", "CHART")
            scene = empty_scene(size, self.config)

        self.scene_item.set_scene(scene)
        elapsed_ms = (time.perf_counter() - start_time) * 1000
        chart_logger.performance_metric("Chart render pass", f"{elapsed_ms:.2f}", "ms")
        return scene

    def resizeEvent(self, ev):
        super().resizeEvent(ev)
        if hasattr(self, 'scene_item'):
            self.refresh()
