import logging

_SHORT_LEVELS = {
    "DEBUG": "DBG",
    "INFO": "INF",
    "WARNING": "WRN",
    "ERROR": "ERR",
    "CRITICAL": "CRT",
}


class ProfessionalFormatter(logging.Formatter):
    """'<time> | INF | <logger> | <message>' with three-letter level names."""

    def __init__(self, datefmt: str = "%Y-%m-%d %H:%M:%S"):
        super().__init__(
            fmt="%(asctime)s | %(shortlevel)-3s | %(name)s | %(message)s",
            datefmt=datefmt,
        )

    def format(self, record) -> str:
        record.shortlevel = _SHORT_LEVELS.get(record.levelname, "???")
        return super().format(record)


def configure_logging(level=logging.WARNING) -> logging.Logger:
    """Attach a stderr handler to the root logger once and return it.

    Later calls only adjust the level, so the CLI can be invoked repeatedly in
    one process (tests) without stacking handlers.
    """
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(ProfessionalFormatter())
        root_logger.addHandler(handler)
    root_logger.setLevel(level)
    return root_logger
