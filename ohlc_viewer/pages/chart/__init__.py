from .page import ChartPageWidget

__all__ = ['ChartPageWidget']
