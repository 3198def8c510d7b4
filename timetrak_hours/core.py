import logging

import requests

from .models import AuthResult, WorkRecord

log = logging.getLogger(__name__)


class TimetrakError(Exception):
    """Base class for every failure that ends a run."""


class ConfigError(TimetrakError):
    pass


class CredentialsError(TimetrakError):
    pass


class TransportError(TimetrakError):
    pass


class StatusError(TimetrakError):
    def __init__(self, message, status_code=None, reason=None):
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason


class DecodeError(TimetrakError):
    pass


class EmptyTimeDataError(TimetrakError):
    pass


def _status_text(response):
    return f"{response.status_code} {response.reason or ''}".strip()


class TimetrakClient:
    """Thin client for the two TimeTrakGo endpoints used by the report."""

    def __init__(self, base_url, timeout=None, session=None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def close(self):
        self.session.close()

    def authenticate(self, username, password):
        url = f"{self.base_url}/auth/authenticate"
        log.debug("GET %s", url)
        try:
            response = self.session.get(
                url,
                params={"username": username, "password": password},
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise TransportError(f"authentication request failed: {e}") from e

        with response:
            log.debug("auth response status %s", response.status_code)
            if response.status_code != 200:
                raise StatusError(
                    f"authentication failed with status: {_status_text(response)}",
                    status_code=response.status_code,
                    reason=response.reason,
                )
            try:
                user = response.json()["user"]
                return AuthResult(user_id=str(user["userId"]), token=str(user["token"]))
            except (ValueError, KeyError, TypeError) as e:
                raise DecodeError(f"failed to parse authentication response: {e!r}") from e

    def get_working_hours(self, user_id, token, start_date, end_date):
        """Fetch calculated hours between two ``YYYY-MM-DD`` dates (inclusive).

        Only the first entry of ``userCalculatedData`` is used. Every element of
        its ``hours`` list counts as one worked day, whatever its amount, and the
        first ``totalHours`` amount is taken as the total for the range.
        """
        url = f"{self.base_url}/punch/GetCalculatedHours"
        params = {
            "userId": user_id,
            "groupId": "",
            "StartDateTime": start_date,
            "EndDateTime": end_date,
            "ReturnWorkWeek": "false",
        }
        headers = {"Authorization": f"Bearer {token}"}
        log.debug("GET %s (%s to %s)", url, start_date, end_date)
        try:
            response = self.session.get(url, params=params, headers=headers, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise TransportError(f"failed to send request: {e}") from e

        with response:
            log.debug("hours response status %s", response.status_code)
            if response.status_code != 200:
                raise StatusError(
                    f"API returned error status: {_status_text(response)}",
                    status_code=response.status_code,
                    reason=response.reason,
                )
            try:
                data = response.json()
                aggregates = data.get("userCalculatedData") or []
                if not aggregates:
                    raise EmptyTimeDataError("received empty or invalid time data")
                first = aggregates[0]
                hours = first.get("hours") or []
                totals = first.get("totalHours") or []
                if not hours or not totals:
                    raise EmptyTimeDataError("received empty or invalid time data")
                total = float(totals[0]["amount"])
            except (ValueError, KeyError, TypeError, AttributeError) as e:
                raise DecodeError(f"failed to parse time data: {e!r}") from e

        if len(aggregates) > 1:
            log.warning("%d aggregates returned, using the first one", len(aggregates))
        if len(totals) > 1:
            log.warning("%d totalHours entries returned, using the first one", len(totals))

        return WorkRecord(days_worked=len(hours), total_hours_worked=total)
