from importlib.resources import files

from .clock import Clock, SystemClock
from .duration import DAY, HOUR, MINUTE, SECOND, Duration, DurationOverflowError
from .seconds import Seconds

# Load documentation files for programmatic access by agents and code-aware tools
_docs_path = files(__package__) / "docs"
docs = {
    "readme": (_docs_path / "README.md").read_text(),
}

__all__ = [
    "Seconds",
    "Duration",
    "DurationOverflowError",
    "Clock",
    "SystemClock",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "docs",
]
