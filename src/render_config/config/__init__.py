from .settings import LogLevel, Settings, build_settings, settings_from_env

__all__ = ["LogLevel", "Settings", "build_settings", "settings_from_env"]
