# Package-wide settings: logging setup, default material and undo depth.

import logging

# Flag that indicates to run in Debug mode or not. When running in Debug mode
# configure_logging() emits DEBUG records (history steps, catalog loads).
DEBUG = False

LOG_FORMAT = '%(asctime)s %(levelname)s [%(name)s] %(message)s'

# Material used when a project or session does not name one
DEFAULT_MATERIAL_ID = 'steel'

# Maximum number of undoable actions kept per session
HISTORY_MAX_SIZE = 50


def configure_logging(level: int | None = None) -> None:
    """Attach a stream handler to the package logger.

    Library modules only create loggers; applications call this once.
    """
    if level is None:
        level = logging.DEBUG if DEBUG else logging.INFO
    logger = logging.getLogger('tube_bend_sim')
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)
