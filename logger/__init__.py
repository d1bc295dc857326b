from .logger import APP_LOGGER_NAME, get_logger, setup_app_level_logger

__all__ = ["APP_LOGGER_NAME", "get_logger", "setup_app_level_logger"]
