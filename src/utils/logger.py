import sys
import traceback
from datetime import datetime
from typing import Callable, Dict, List, Optional
from models.enums import LogLevel, LogCategory

# === ANSI COLORS ===
class Colors:
    """ANSI escape codes for colored terminal output"""
    RESET = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'

    # Foreground colors
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    BLUE = '\033[34m'
    MAGENTA = '\033[35m'
    CYAN = '\033[36m'
    WHITE = '\033[37m'

    # Bright foreground colors
    BRIGHT_BLUE = '\033[94m'
    BRIGHT_MAGENTA = '\033[95m'
    BRIGHT_CYAN = '\033[96m'
    BRIGHT_WHITE = '\033[97m'
    BRIGHT_YELLOW = '\033[93m'
    BRIGHT_GREEN = '\033[92m'


CATEGORY_COLORS = {
    LogCategory.CONFIG: Colors.CYAN,
    LogCategory.ANIMATION: Colors.BRIGHT_YELLOW,
    LogCategory.TRANSITION: Colors.MAGENTA,
    LogCategory.SHAPE: Colors.BRIGHT_GREEN,
    LogCategory.CANVAS: Colors.BRIGHT_BLUE,
    LogCategory.SYSTEM: Colors.BRIGHT_WHITE,
    LogCategory.SHUTDOWN: Colors.BRIGHT_MAGENTA,
    LogCategory.TASK: Colors.BLUE,
}

LEVEL_SYMBOLS = {
    LogLevel.DEBUG: '·',
    LogLevel.INFO: '✓',
    LogLevel.WARN: '⚠',
    LogLevel.ERROR: '✗',
}

LEVEL_COLORS = {
    LogLevel.DEBUG: Colors.DIM,
    LogLevel.INFO: Colors.GREEN,
    LogLevel.WARN: Colors.YELLOW,
    LogLevel.ERROR: Colors.RED,
}

# Sink signature: sink(record) where record has timestamp, level, category, message, details
LogSink = Callable[[Dict[str, object]], None]


# === CORE LOGGER ===
class Logger:
    """
    Structured logger with compact output format

    Format:
    [HH:MM:SS] CATEGORY · Message
               └─ Detail 1
               └─ Detail 2

    Example:
    [14:23:45] ANIMATION ✓ Update cycle
               ├─ primitive: circle
               └─ shapes: 10
    """

    def __init__(self, min_level: LogLevel = LogLevel.INFO, use_colors: bool = True):
        """
        Initialize logger

        Args:
            min_level: Minimum log level to display
            use_colors: Enable ANSI color codes (disable for file output)
        """
        self.min_level = min_level
        self.use_colors = use_colors
        self._level_priority = {
            LogLevel.DEBUG: 0,
            LogLevel.INFO: 1,
            LogLevel.WARN: 2,
            LogLevel.ERROR: 3,
        }
        self._sinks: List[LogSink] = []

    def _should_log(self, level: LogLevel) -> bool:
        """Check if message should be logged based on level"""
        return self._level_priority[level] >= self._level_priority[self.min_level]

    def _colorize(self, text: str, color: str) -> str:
        """Apply color to text if colors enabled"""
        if not self.use_colors:
            return text
        return f"{color}{text}{Colors.RESET}"

    def _format_timestamp(self) -> str:
        """Format current time as [HH:MM:SS]"""
        return datetime.now().strftime('[%H:%M:%S]')

    def _format_category(self, category: LogCategory) -> str:
        """Format category name with color"""
        color = CATEGORY_COLORS.get(category, Colors.WHITE)
        return self._colorize(category.name.ljust(10), color)

    def _format_level_symbol(self, level: LogLevel) -> str:
        """Format level symbol with color"""
        symbol = LEVEL_SYMBOLS.get(level, '·')
        return self._colorize(symbol, LEVEL_COLORS.get(level, Colors.WHITE))

    def add_sink(self, sink: LogSink) -> None:
        """
        Attach an extra receiver for log records.

        Sinks get every record that passes the level filter, after it
        is printed. Used by tests to capture diagnostics.
        """
        self._sinks.append(sink)

    def remove_sink(self, sink: LogSink) -> None:
        if sink in self._sinks:
            self._sinks.remove(sink)

    def log(
        self,
        category: LogCategory,
        message: str,
        level: LogLevel = LogLevel.INFO,
        details: Optional[list] = None,
        exc_info: bool = False,
        **kwargs
    ):
        """
        Log a structured message

        Args:
            category: Log category (ANIMATION, TRANSITION, etc.)
            message: Main message text
            level: Log level (DEBUG, INFO, WARN, ERROR)
            details: List of detail strings to show below message
            exc_info: Print the traceback of the exception being handled
            **kwargs: Additional key-value pairs to show as details

        Example:
            logger.log(
                LogCategory.ANIMATION,
                "Session started",
                primitive="circle",
                interval_ms=3000
            )

            Output:
            [14:23:45] ANIMATION ✓ Session started
                       ├─ primitive: circle
                       └─ interval_ms: 3000
        """
        if not self._should_log(level):
            return

        # Build main line
        timestamp = self._format_timestamp()
        cat = self._format_category(category)
        sym = self._format_level_symbol(level)
        msg = self._colorize(message, LEVEL_COLORS.get(level, Colors.WHITE))

        print(f"{timestamp} {cat} {sym} {msg}")

        # Add kwargs as details
        all_details = list(details or [])
        for k, v in kwargs.items():
            all_details.append(f"{k}: {v}")

        # Print details with tree structure
        if all_details:
            indent = " " * 11
            for i, d in enumerate(all_details):
                # Last item gets different tree character
                tree = "└─" if i == len(all_details) - 1 else "├─"
                print(f"{indent}{self._colorize(tree, Colors.DIM)} {d}")

        if exc_info and sys.exc_info()[0] is not None:
            print(traceback.format_exc(), end="")

        for sink in self._sinks:
            sink({
                "timestamp": datetime.now().isoformat(),
                "level": level,
                "category": category,
                "message": message,
                "details": all_details,
            })

    # === Level helpers ===
    def debug(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.DEBUG, **kw)
    def info(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.INFO, **kw)
    def warn(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.WARN, **kw)
    def error(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.ERROR, **kw)

    # === Contextual logger creation ===
    def for_category(self, category: LogCategory) -> 'BoundLogger':
        """Return a contextual logger bound to a specific category."""
        return BoundLogger(self, category)


class BoundLogger:
    """Logger bound to a default category, with ability to override if needed."""

    def __init__(self, base: Logger, category: LogCategory):
        self._base = base
        self._category = category

    def log(self, message: str, level: LogLevel = LogLevel.INFO, category: Optional[LogCategory] = None, **kw):
        """Allows overriding category if necessary."""
        self._base.log(category or self._category, message, level, **kw)

    # Shortcut methods
    def debug(self, message: str, **kw): self.log(message, LogLevel.DEBUG, **kw)
    def info(self, message: str, **kw): self.log(message, LogLevel.INFO, **kw)
    def warn(self, message: str, **kw): self.log(message, LogLevel.WARN, **kw)
    def error(self, message: str, **kw): self.log(message, LogLevel.ERROR, **kw)

    def with_category(self, category: LogCategory) -> 'BoundLogger':
        """Create another bound logger from this one."""
        return BoundLogger(self._base, category)


# === Global instance helpers ===
_logger = Logger()

def get_logger() -> Logger:
    return _logger

def get_category_logger(category: LogCategory) -> BoundLogger:
    """Returns a logger bound to a specific category"""
    return _logger.for_category(category)

def configure_logger(min_level: LogLevel = LogLevel.INFO, use_colors: bool = True):
    """
    Configure the logger singleton (modify in-place, don't create new instance).

    Updates properties on the existing instance rather than replacing it,
    so bound loggers and attached sinks remain valid.
    """
    _logger.min_level = min_level
    _logger.use_colors = use_colors
