import logging


def setup_logging(level: str = "INFO") -> None:
    """
    Configures the root logger with a console handler.

    Does nothing if the root logger already has handlers, so repeated
    imports of the app (e.g. in tests) don't stack handlers.

    Args:
        level (str): Log level name, case insensitive.
    """
    logger = logging.getLogger()
    if logger.handlers:
        return

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    logger.addHandler(handler)
