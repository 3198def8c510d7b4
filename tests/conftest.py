import json

import pytest


class FakeResponse:
    def __init__(self, status_code=200, body=None, reason="OK", text=None):
        self.status_code = status_code
        self.reason = reason
        self._text = text if text is not None else json.dumps(body)
        self.closed = False

    def json(self):
        return json.loads(self._text)

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()


class FakeSession:
    """Returns queued responses (or raises queued exceptions) in order."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []
        self.closed = False

    def get(self, url, params=None, headers=None, timeout=None):
        self.calls.append({"url": url, "params": params, "headers": headers, "timeout": timeout})
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    def close(self):
        self.closed = True


def auth_body(user_id="u1", token="t1"):
    return {"user": {"userId": user_id, "token": token}}


def hours_body(hours, totals):
    return {
        "userCalculatedData": [
            {
                "hours": [{"amount": a} for a in hours],
                "totalHours": [{"amount": a} for a in totals],
            }
        ]
    }


@pytest.fixture
def fake_session():
    def make(*responses):
        return FakeSession(*responses)
    return make
