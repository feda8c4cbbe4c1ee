from .app_config import AppConfig, app_config

__all__ = ['AppConfig', 'app_config']
