from flask import Flask

from app.report import send_daily_report
from app.whatsapp import WhatsAppSession


def create_app(session=None):
    app = Flask(__name__)

    if session is None:
        session = WhatsAppSession()
        session.initialize()
    app.extensions["whatsapp_session"] = session

    @app.route("/")
    def index():
        return "Server is running..."

    @app.route("/send-report")
    def send_report():
        # The acknowledgement is the same whatever happened to the delivery
        outcome = send_daily_report(session)
        print(f"  [web] /send-report finished ({outcome})")
        return "Send report triggered!"

    return app
