import logging


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger with a console handler.

    Does nothing when the root logger already has handlers, so repeated
    app creation (tests, reloads) does not duplicate output.
    """
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return

    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    root_logger.addHandler(handler)
