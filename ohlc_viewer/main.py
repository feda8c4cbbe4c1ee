#!/usr/bin/env python3
"""
OHLC Viewer - Main Application

Loads the most recent daily bars for the configured symbol and shows them as
a candlestick chart.
"""

import sys
from typing import List, Optional

import psycopg2
from PyQt6.QtWidgets import QApplication, QMainWindow

from ohlc_viewer.chart.config import ChartConfig
from ohlc_viewer.chart.types import Bar
from ohlc_viewer.pages.chart import ChartPageWidget
from ohlc_viewer.utilities.config.app_config import app_config
from ohlc_viewer.utilities.data.db_manager import db_manager
from ohlc_viewer.utilities.dialogs import show_error, show_info
from ohlc_viewer.utilities.logger import chart_logger
from ohlc_viewer.utilities.services.price_service import price_service


class MainWindow(QMainWindow):
    """Main window holding the chart page"""

    def __init__(self, symbol: str, config: Optional[ChartConfig] = None):
        super().__init__()
        self.setWindowTitle("OHLC Viewer")
        self.setGeometry(100, 100, 1200, 700)

        self.chart_page = ChartPageWidget(symbol, config)
        self.setCentralWidget(self.chart_page)
        self.setup_styling()

    def set_bars(self, bars: List[Bar]):
        self.chart_page.set_bars(bars)

    def setup_styling(self):
        """Apply window styling"""
        background = self.chart_page.config.background.hex
        self.setStyleSheet(f"""
            QMainWindow {{
                background-color: {background};
            }}
        """)


def load_bars(symbol: str, limit: int, parent=None) -> List[Bar]:
    """Fetch bars for ``symbol``; database failures leave the chart empty."""
    try:
        bars = price_service.load_daily_bars(symbol, limit)
    except psycopg2.Error as e:
        chart_logger.error(f"Could not load prices for {symbol}: {str(e)}", "MAIN")
        show_error(parent, "Database Error", f"Could not load prices for {symbol}.\n\n{str(e).strip()}")
        return []

    if not bars:
        chart_logger.warning(f"No price data for {symbol}", "MAIN")
        show_info(parent, "No Data", f"No price data found for {symbol}.")
    return bars


def setup_global_styling(app):
    """Setup global application styling"""
    app.setStyleSheet("""
        * { border-radius: 0px; }

        QMessageBox {
            background-color: #212934;
            color: #eff8ff;
            min-width: 400px;
        }
        QMessageBox QLabel {
            color: #eff8ff;
            background-color: transparent;
            font-size: 14px;
            padding: 20px;
        }
        QMessageBox QPushButton {
            background-color: #2d3748;
            color: #eff8ff;
            border: 1px solid #4a5568;
            padding: 8px 24px;
            min-width: 80px;
        }
        QMessageBox#errorDialog {
            border: 1px solid #dc3030;
        }
    """)


def main():
    """Main function to run the application"""
    chart_logger.info("OHLC Viewer starting", "MAIN")

    app = QApplication(sys.argv)
    setup_global_styling(app)
    app.aboutToQuit.connect(db_manager.close)

    symbol = app_config.symbol
    window = MainWindow(symbol, app_config.get_chart_config())
    window.show()

    window.set_bars(load_bars(symbol, app_config.bar_limit, window))

    chart_logger.info("Entering PyQt6 event loop", "MAIN")
    result = app.exec()
    chart_logger.info("Application ended", "MAIN")
    return result


if __name__ == "__main__":
    sys.exit(main())
