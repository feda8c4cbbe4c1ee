"""
Chart Page

Symbol header above the candlestick chart, on the dark application background.
"""

from typing import Optional, Sequence

from PyQt6.QtWidgets import QFrame, QLabel, QVBoxLayout

from ohlc_viewer.chart.config import ChartConfig, DEFAULT_CONFIG
from ohlc_viewer.chart.types import Bar
from ohlc_viewer.pages.chart.widgets import ChartWidget
from ohlc_viewer.utilities.logger import chart_logger


class ChartPageWidget(QFrame):
    """Page showing one symbol's daily candles"""

    def __init__(self, symbol: str = "", config: Optional[ChartConfig] = None, parent=None):
        super().__init__(parent)
        self.setObjectName("chartPage")
        self.symbol = symbol
        self.config = config or DEFAULT_CONFIG

        self.symbol_label = None
        self.chart_widget = None

        self.init_ui()
        self.setup_styling()

    def init_ui(self):
        """Initialize the UI"""
        layout = QVBoxLayout()
        layout.setContentsMargins(5, 5, 5, 5)
        layout.setSpacing(8)
        self.setLayout(layout)

        self.symbol_label = QLabel(self._symbol_text())
        self.symbol_label.setObjectName("symbolLabel")
        layout.addWidget(self.symbol_label)

        chart_frame = QFrame()
        chart_frame.setObjectName("chartFrame")
        chart_layout = QVBoxLayout()
        chart_layout.setContentsMargins(10, 10, 10, 10)
        chart_frame.setLayout(chart_layout)

        self.chart_widget = ChartWidget(self.config)
        chart_layout.addWidget(self.chart_widget)
        layout.addWidget(chart_frame, 1)

    def _symbol_text(self) -> str:
        return f"Symbol: {self.symbol}"

    def set_symbol(self, symbol: str):
        self.symbol = symbol
        self.symbol_label.setText(self._symbol_text())

    def set_bars(self, bars: Sequence[Bar]):
        chart_logger.ui_operation("Chart page data", f"{self.symbol}: {len(bars)} bars")
        self.chart_widget.set_bars(bars)

    def setup_styling(self):
        """Apply styling to the page"""
        background = self.config.background.hex
        foreground = self.config.foreground.hex
        self.setStyleSheet(f"""
            #chartPage {{
                background-color: {background};
            }}

            #chartFrame {{
                background-color: {background};
                border: none;
            }}

            #symbolLabel {{
                color: {foreground};
                background-color: transparent;
                font-size: 14px;
            }}
        """)
