# backend/app/core/logging_config.py
import logging
import sys

from app.core.config import settings  # For LOG_LEVEL


def setup_logging():
    """
    Configures logging for the application.
    Logs go to stdout; the level comes from the LOG_LEVEL setting.
    """
    log_level_str = settings.LOG_LEVEL.upper()
    numeric_level = getattr(logging, log_level_str, None)

    if not isinstance(numeric_level, int):
        print(
            f"--- LOGGING_CONFIG.PY: Invalid log level: {log_level_str}. Defaulting to INFO. ---",
            flush=True,
        )
        numeric_level = logging.INFO

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(funcName)s:%(lineno)d - %(message)s"
    )

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)

    root_logger = logging.getLogger()

    # Called once at startup, but never stack duplicate handlers if it isn't.
    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    root_logger.addHandler(stream_handler)
    root_logger.setLevel(numeric_level)

    # The rules engine is chatty at DEBUG; report where each area ended up.
    loggers_to_check = [
        "app.game_logic.movement",
        "app.game_logic.room_events",
        "app.game_logic.item_handlers",
        "app.main",
        "app.websocket_router",
    ]
    for logger_name in loggers_to_check:
        effective_level = logging.getLogger(logger_name).getEffectiveLevel()
        print(
            f"--- LOGGING_CONFIG.PY: Effective level for '{logger_name}': {effective_level} ({logging.getLevelName(effective_level)}) ---",
            flush=True,
        )

    print(
        f"--- LOGGING_CONFIG.PY: Logging setup COMPLETE. Root logger level set to {logging.getLevelName(root_logger.level)}. ---",
        flush=True,
    )
