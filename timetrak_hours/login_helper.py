"""login_helper

Provides `get_credentials()` which:
- Prompts for the TimeTrakGo username on stdin (visible input).
- Prompts for the password without echo via `getpass`.
- Returns both stripped of surrounding whitespace as `Credentials`.

Nothing is stored: credentials live only for the running session.
"""

from __future__ import annotations

import getpass
import sys

from .core import CredentialsError
from .models import Credentials


def _read_line(stream) -> str:
    line = stream.readline()
    if not line:
        raise EOFError("EOF")
    return line


def get_credentials(stdin=None, read_password=None) -> Credentials:
    """Prompt for username and password.

    `stdin` and `read_password` default to `sys.stdin` and `getpass.getpass`;
    tests pass their own.
    """
    stdin = stdin or sys.stdin
    # getpass already ends the line on the terminal
    newline_after_password = read_password is not None
    read_password = read_password or getpass.getpass

    print("Please enter your username:")
    try:
        username = _read_line(stdin)
    except (EOFError, OSError) as e:
        raise CredentialsError(f"failed to read username: {e}") from e

    print("Please enter your password:")
    try:
        password = read_password("")
    except (EOFError, OSError) as e:
        raise CredentialsError(f"failed to read password: {e}") from e
    if newline_after_password:
        print()

    return Credentials(username=username.strip(), password=password.strip())
