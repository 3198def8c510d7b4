from __future__ import annotations

import datetime
from dataclasses import dataclass


@dataclass(frozen=True)
class Credentials:
    username: str
    password: str

    def __repr__(self) -> str:
        return f"Credentials(username={self.username!r}, password='***')"


@dataclass(frozen=True)
class AuthResult:
    user_id: str
    token: str


@dataclass(frozen=True)
class DateRange:
    start: datetime.date
    end: datetime.date

    @property
    def start_str(self) -> str:
        return self.start.strftime("%Y-%m-%d")

    @property
    def end_str(self) -> str:
        return self.end.strftime("%Y-%m-%d")


@dataclass(frozen=True)
class WorkRecord:
    days_worked: int
    total_hours_worked: float


@dataclass(frozen=True)
class Report:
    days_worked: int
    hours_worked: float
    expected_hours: float
    delta: float
