import sys

import qrcode
import requests
from apscheduler.schedulers.background import BackgroundScheduler

import config


class WhatsAppError(RuntimeError):
    pass


def _print_qr(payload: str):
    qr = qrcode.QRCode(border=1)
    qr.add_data(payload)
    qr.print_ascii(out=sys.stdout)


class WhatsAppSession:
    """WhatsApp session backed by a whatsapp-web.js bridge process.

    The bridge owns the browser, the QR login and the LocalAuth state. This
    class only polls its status and asks it to deliver messages.
    """

    def __init__(self, bridge_url: str | None = None, poll_seconds: int | None = None):
        self.bridge_url = (bridge_url or config.WHATSAPP_BRIDGE_URL).rstrip("/")
        self.poll_seconds = poll_seconds or config.WHATSAPP_POLL_SECONDS
        self.info = None
        self._last_qr = None
        self._ready_callbacks = []
        self._qr_callbacks = []
        self._scheduler = None

    def is_ready(self) -> bool:
        return self.info is not None

    def on_ready(self, callback):
        self._ready_callbacks.append(callback)

    def on_qr(self, callback):
        self._qr_callbacks.append(callback)

    def initialize(self):
        """Check the bridge once, then keep polling it in the background."""
        self.refresh_status()
        self._scheduler = BackgroundScheduler()
        self._scheduler.add_job(self.refresh_status, "interval", seconds=self.poll_seconds)
        self._scheduler.start()
        print(f"  [whatsapp] Polling bridge at {self.bridge_url} every {self.poll_seconds}s")

    def shutdown(self):
        if self._scheduler:
            self._scheduler.shutdown(wait=False)
            self._scheduler = None

    def refresh_status(self):
        try:
            resp = requests.get(f"{self.bridge_url}/status", timeout=30)
            resp.raise_for_status()
            status = resp.json()
        except (requests.RequestException, ValueError) as e:
            if self.info is not None:
                print(f"  [whatsapp] Lost contact with bridge: {e}", file=sys.stderr)
            self.info = None
            return

        qr = status.get("qr")
        if qr and qr != self._last_qr:
            self._last_qr = qr
            _print_qr(qr)
            print("Scan this QR code with WhatsApp to log in.")
            for callback in self._qr_callbacks:
                callback(qr)

        info = status.get("info")
        if info and self.info is None:
            self.info = info
            self._last_qr = None
            print("WhatsApp client ready!")
            for callback in self._ready_callbacks:
                callback(info)
        elif not info and self.info is not None:
            print(f"  [whatsapp] Session dropped (state={status.get('state')})", file=sys.stderr)
            self.info = None

    def send_message(self, target: str, text: str) -> bool:
        """Deliver a text message through the bridge. Returns the bridge's verdict."""
        try:
            resp = requests.post(
                f"{self.bridge_url}/send",
                json={"chatId": target, "message": text},
                timeout=30,
            )
        except requests.RequestException as e:
            raise WhatsAppError(f"Bridge unreachable: {e}") from e

        if resp.status_code == 409:
            self.info = None
            raise WhatsAppError("Bridge reports the WhatsApp session is not logged in")
        if not resp.ok:
            raise WhatsAppError(f"Bridge send failed ({resp.status_code}): {resp.text}")
        return bool(resp.json().get("success"))
