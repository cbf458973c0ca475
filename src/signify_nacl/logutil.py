import logging
import re
from typing import Iterable, Union


_SECRET_KEY_TEXT = re.compile(r"NACL-SECRET-KEY-[A-Za-z0-9+/=]*")
_SECRET_ASSIGNMENT = re.compile(r"(secret|password|key)=\S+", re.IGNORECASE)


def redact(msg: str) -> str:
    msg = _SECRET_KEY_TEXT.sub("NACL-SECRET-KEY-***", msg)
    return _SECRET_ASSIGNMENT.sub(r"\1=***", msg)


class RedactingFilter(logging.Filter):
    """Redact secret key text and key=value style secrets from log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            record.msg = redact(str(record.getMessage()))
            record.args = None
        except Exception:
            pass
        return True


def setup_logging(
    level: Union[int, str] = logging.WARNING,
    loggers: Iterable[str] = ("signify_nacl", "signify_cli"),
) -> None:
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(level=level)
    f = RedactingFilter()
    # logger filters do not see records from child loggers, handler filters do
    for handler in logging.getLogger().handlers:
        if not any(isinstance(x, RedactingFilter) for x in handler.filters):
            handler.addFilter(f)
    for name in loggers:
        logging.getLogger(name).setLevel(level)
