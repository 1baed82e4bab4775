import logging
import sys
from pathlib import Path


class LevelPadFormatter(logging.Formatter):
    LEVEL_WIDTH = len("WARNING")

    def format(self, record):
        level = record.levelname
        pad = " " * (self.LEVEL_WIDTH - len(level))
        record.padded = f"[{level}]{pad}"
        record.unpadded = f"[{level}]"
        return super().format(record)


def configure(
    debug: bool, name: str, logfile: Path | None = None, package: str = "procsys"
) -> logging.Logger:
    """
    Configure the named logger, and the procsys package logger behind it, to
    write to logfile or to stderr when no logfile is given.
    """
    level = logging.DEBUG if debug else logging.INFO

    logger = logging.getLogger(name)
    logger.setLevel(level)
    # No interference from pytest / root handlers
    logger.propagate = False

    package_logger = logging.getLogger(package)
    package_logger.setLevel(level)
    package_logger.propagate = False

    handler: logging.Handler
    if logfile is not None:
        handler = logging.FileHandler(logfile, mode="a", encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(
        LevelPadFormatter("%(asctime)s %(unpadded)s %(name)s.%(funcName)s - %(message)s")
    )

    for target in {logger, package_logger}:
        # Do not add handlers twice
        for old in list(target.handlers):
            target.removeHandler(old)
            old.close()
        target.addHandler(handler)

    return logger
