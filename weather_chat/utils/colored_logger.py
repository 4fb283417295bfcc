"""
Colored console logging.
Each service component (knowledge base, classifier, prompt builder, LLM client)
logs in its own color so a request can be followed through the terminal.
"""

import logging
import sys
from typing import Optional, Union


# ANSI color codes
class Colors:
    """ANSI color codes for terminal output."""
    RESET = '\033[0m'
    BOLD = '\033[1m'

    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    BLUE = '\033[34m'
    MAGENTA = '\033[35m'
    CYAN = '\033[36m'
    WHITE = '\033[37m'

    BRIGHT_BLACK = '\033[90m'
    BRIGHT_RED = '\033[91m'
    BRIGHT_BLUE = '\033[94m'


# Component-specific colors
COMPONENT_COLORS = {
    'knowledge': Colors.BRIGHT_BLUE,
    'classification': Colors.YELLOW,
    'prompt': Colors.CYAN,
    'llm': Colors.GREEN,
    'default': Colors.WHITE
}

LEVEL_COLORS = {
    'DEBUG': Colors.BRIGHT_BLACK,
    'INFO': Colors.WHITE,
    'WARNING': Colors.YELLOW,
    'ERROR': Colors.RED,
    'CRITICAL': Colors.BRIGHT_RED + Colors.BOLD,
}


class ColoredFormatter(logging.Formatter):
    """Formatter coloring records by component, falling back to level."""

    def __init__(self, fmt: Optional[str] = None, datefmt: Optional[str] = None):
        super().__init__(
            fmt or '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt or '%Y-%m-%d %H:%M:%S'
        )

    def format(self, record: logging.LogRecord) -> str:
        component = getattr(record, 'component', None)
        if component:
            color = COMPONENT_COLORS.get(component, COMPONENT_COLORS['default'])
        else:
            color = LEVEL_COLORS.get(record.levelname, Colors.WHITE)

        return f"{color}{super().format(record)}{Colors.RESET}"


class ComponentLogger(logging.LoggerAdapter):
    """Logger adapter tagging every record with its component name."""

    def process(self, msg, kwargs):
        extra = dict(kwargs.get('extra') or {})
        extra['component'] = self.extra['component']
        kwargs['extra'] = extra
        return msg, kwargs


def setup_colored_logging(level: Union[int, str] = logging.INFO) -> None:
    """
    Setup colored logging for the application.

    Args:
        level: Logging level as int or name (default: INFO)
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(ColoredFormatter())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()
    root_logger.addHandler(console_handler)


def get_plugin_logger(name: str, component: str) -> ComponentLogger:
    """
    Get a component logger with colored output.

    Args:
        name: Logger name (usually __name__)
        component: Component type (knowledge, classification, prompt, llm)

    Returns:
        ComponentLogger instance
    """
    return ComponentLogger(logging.getLogger(name), {'component': component})
