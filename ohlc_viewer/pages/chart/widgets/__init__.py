"""Chart page widgets"""

from .chart_widget import ChartWidget, SceneItem

__all__ = [
    'ChartWidget',
    'SceneItem',
]
