"""Logging utilities for roundelim.

Search results are often logged as rendered multi-line tables, so the
formatter keeps continuation lines readable instead of prefixing each of
them with metadata.
"""

import logging

__all__ = ["setup_logging", "MultilineFormatter"]

_NOISY_LOGGERS = ("matplotlib", "PIL")


class MultilineFormatter(logging.Formatter):
    """Formatter for messages that may span several lines.

    The first line is padded to ``msg_width`` and optionally followed by
    metadata; continuation lines are indented by ``indent`` spaces.

    Attributes:
        msg_width: Width the first line is padded to before the metadata.
        show_metadata: Whether to append timestamp/level/name metadata.
        indent: Number of spaces prepended to continuation lines.
    """

    def __init__(self, msg_width: int, show_metadata: bool = True, indent: int = 0) -> None:
        """Initialize the formatter.

        Args:
            msg_width: Width for message alignment.
            show_metadata: Whether to append timestamp/level/name metadata.
            indent: Number of spaces prepended to continuation lines.
        """
        super().__init__(datefmt="%Y-%m-%d %H:%M:%S")
        self.msg_width = msg_width
        self.show_metadata = show_metadata
        self.indent = indent

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record, keeping continuation lines aligned.

        Args:
            record: The log record to format.

        Returns:
            Formatted log message string.
        """
        lines = record.getMessage().split("\n")

        first_line = lines[0]
        if self.show_metadata:
            metadata = f"{self.formatTime(record)} - {record.levelname} - {record.name}"
            first_line = f"{lines[0]:<{self.msg_width}}{metadata}"

        if len(lines) == 1:
            return first_line
        pad = " " * self.indent
        continuation = "\n".join(f"{pad}{line}" for line in lines[1:])
        return f"{first_line}\n{continuation}"


def setup_logging(
    log_file: str | None = None,
    level: int = logging.DEBUG,
    msg_width: int = 100,
    show_metadata: bool = False,
    indent: int = 0,
) -> logging.Handler:
    """Attach a :class:`MultilineFormatter` handler to the root logger.

    Args:
        log_file: Path of the log file, overwritten. ``None`` logs to stderr.
        level: Logging level (default: DEBUG).
        msg_width: Width for message alignment (default: 100).
        show_metadata: Whether to append timestamp/level/name metadata to log lines.
        indent: Number of spaces prepended to continuation lines.

    Returns:
        The installed handler, so callers can remove it again.
    """
    handler: logging.Handler
    if log_file is None:
        handler = logging.StreamHandler()
    else:
        handler = logging.FileHandler(log_file, mode="w")
    handler.setFormatter(MultilineFormatter(msg_width=msg_width, show_metadata=show_metadata, indent=indent))
    logging.root.addHandler(handler)
    logging.root.setLevel(level)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return handler
