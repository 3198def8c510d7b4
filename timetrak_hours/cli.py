from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace

from .config import Settings, load_settings
from .core import TimetrakClient, TimetrakError
from .dates import get_start_and_end_dates
from .login_helper import get_credentials
from .report import log_result

log = logging.getLogger(__name__)


def run(settings: Settings, client: TimetrakClient | None = None, credentials_reader=get_credentials, now=None):
    """Credentials -> authenticate -> fetch this month's hours -> print the report.

    The first failure stops the run; it is re-raised with the stage it came from.
    """
    try:
        credentials = credentials_reader()
    except TimetrakError as e:
        raise TimetrakError(f"failed to get credentials: {e}") from e

    own_client = client is None
    if own_client:
        client = TimetrakClient(settings.base_url, timeout=settings.timeout)
    try:
        try:
            auth = client.authenticate(credentials.username, credentials.password)
        except TimetrakError as e:
            raise TimetrakError(f"authentication failed: {e}") from e
        log.debug("authenticated as user %s", auth.user_id)

        try:
            start_date, end_date = get_start_and_end_dates(now)
            record = client.get_working_hours(auth.user_id, auth.token, start_date, end_date)
        except TimetrakError as e:
            raise TimetrakError(f"failed to retrieve working hours: {e}") from e
    finally:
        if own_client:
            client.close()

    return log_result(record.days_worked, record.total_hours_worked, settings.expected_hours_per_day)


def _non_negative_hours(value):
    try:
        hours = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"must be a number, got {value!r}")
    if hours < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {value!r}")
    return hours


def _parse_args(argv):
    parser = argparse.ArgumentParser(
        prog="timetrak-hours",
        description="Compare this month's TimeTrakGo hours with the expected hours.",
    )
    parser.add_argument("--base-url", help="API base URL (default: TIMETRAK_BASE_URL or the rubixx endpoint)")
    parser.add_argument("--expected-hours", type=_non_negative_hours, help="expected hours per worked day (default: 7.4)")
    parser.add_argument("--env-file", help="read settings from this .env file")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    return parser.parse_args(argv)


def main(argv=None):
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger("requests").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    try:
        settings = load_settings(args.env_file)
        if args.base_url:
            settings = replace(settings, base_url=args.base_url.rstrip("/"))
        if args.expected_hours is not None:
            settings = replace(settings, expected_hours_per_day=args.expected_hours)
        run(settings)
    except TimetrakError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("Error: interrupted", file=sys.stderr)
        sys.exit(1)
    return 0
