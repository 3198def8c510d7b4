"""timetrak_hours package

Checks the current month's TimeTrakGo punch-clock hours against the expected
hours (days worked x hours per day).

Public API:
- get_credentials: interactive username/password prompt
- TimetrakClient: authenticate and fetch calculated hours
- get_start_and_end_dates: first/last day of the current month
- log_result: print the worked vs expected summary

CLI entrypoint exposed via setup.py as `timetrak-hours`.
"""
from .core import TimetrakClient, TimetrakError
from .dates import get_start_and_end_dates
from .login_helper import get_credentials  # re-export
from .report import log_result
from .cli import main  # noqa: E402 (runtime import after definitions)

__version__ = "0.1.0"

__all__ = [
    "TimetrakClient",
    "TimetrakError",
    "get_credentials",
    "get_start_and_end_dates",
    "log_result",
    "main",
    "__version__",
]
