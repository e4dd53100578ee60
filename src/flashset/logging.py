import logging
import sys


APP_LOGGER_PREFIX = "flashset"


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


class _AppOrThirdPartyWarnings(logging.Filter):
    """Pass every record from our namespace, only WARNING+ from anything else."""

    def filter(self, record: logging.LogRecord) -> bool:
        name = getattr(record, "name", "") or ""
        if name.startswith(APP_LOGGER_PREFIX):
            return True
        return record.levelno >= logging.WARNING


def setup_logging(
    level: int | str = "INFO",
    *,
    include_time: bool = True,
    quiet_third_party: bool = True,
) -> None:
    """Send all logging to stdout with one handler.

    ``level`` takes an int or a name such as "DEBUG". With ``quiet_third_party``
    set, aiohttp and other non-flashset loggers are cut down to WARNING+.
    """
    root = logging.getLogger()
    root.setLevel(level.upper() if isinstance(level, str) else level)

    # safe to call again: old handlers go first
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream=sys.stdout)

    parts = ["%(asctime)s"] if include_time else []
    parts.extend(["%(levelname)s", "%(name)s", "-", "%(message)s"])
    handler.setFormatter(logging.Formatter(fmt=" ".join(parts), datefmt="%Y-%m-%d %H:%M:%S"))

    if quiet_third_party:
        handler.addFilter(_AppOrThirdPartyWarnings())

    root.addHandler(handler)
