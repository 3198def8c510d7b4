import getpass
import io

import pytest

from timetrak_hours.core import CredentialsError
from timetrak_hours.login_helper import get_credentials


def test_credentials_are_stripped(capsys) -> None:
    creds = get_credentials(stdin=io.StringIO("  alice \n"), read_password=lambda prompt: " s3cret\t")

    assert creds.username == "alice"
    assert creds.password == "s3cret"
    assert capsys.readouterr().out == "Please enter your username:\nPlease enter your password:\n\n"


def test_empty_values_pass_through() -> None:
    creds = get_credentials(stdin=io.StringIO("\n"), read_password=lambda prompt: "")

    assert creds.username == ""
    assert creds.password == ""


def test_closed_stdin_fails_on_username() -> None:
    with pytest.raises(CredentialsError, match="failed to read username"):
        get_credentials(stdin=io.StringIO(""), read_password=lambda prompt: "pw")


def test_password_read_error() -> None:
    def broken(prompt):
        raise EOFError("no tty")

    with pytest.raises(CredentialsError, match="failed to read password: no tty"):
        get_credentials(stdin=io.StringIO("bob\n"), read_password=broken)


def test_password_not_in_repr() -> None:
    creds = get_credentials(stdin=io.StringIO("bob\n"), read_password=lambda prompt: "hunter2")

    assert "hunter2" not in repr(creds)


def test_no_extra_newline_after_getpass(monkeypatch, capsys) -> None:
    monkeypatch.setattr(getpass, "getpass", lambda prompt="": "pw\n")

    creds = get_credentials(stdin=io.StringIO("carol\n"))

    assert creds.password == "pw"
    assert capsys.readouterr().out == "Please enter your username:\nPlease enter your password:\n"
