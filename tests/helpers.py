"""Shared fakes for the Clockify API, the WhatsApp bridge and the session."""

import requests


class FakeResponse:
    def __init__(self, payload=None, status_code=200, text=""):
        self._payload = payload
        self.status_code = status_code
        self.text = text

    @property
    def ok(self):
        return self.status_code < 400

    def raise_for_status(self):
        if not self.ok:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class FakeSession:
    def __init__(self, ready=True, result=True, error=None):
        self.ready = ready
        self.result = result
        self.error = error
        self.sent = []

    def is_ready(self):
        return self.ready

    def send_message(self, target, text):
        self.sent.append((target, text))
        if self.error:
            raise self.error
        return self.result
