import os
from dotenv import load_dotenv

load_dotenv()

PORT = int(os.getenv("PORT", "3000"))

CLOCKIFY_API_KEY = os.getenv("CLOCKIFY_API_KEY", "")
CLOCKIFY_BASE_URL = os.getenv("CLOCKIFY_BASE_URL", "https://api.clockify.me/api/v1")
WORKSPACE_ID = os.getenv("WORKSPACE_ID", "")
USER_ID = os.getenv("USER_ID", "")

# Ticket tags like "[CA-12]:" are stripped from entry descriptions
TICKET_PREFIX = os.getenv("TICKET_PREFIX", "CA")

# WhatsApp chat id, e.g. 91XXXXXXXXXX@c.us
TARGET_NUMBER = os.getenv("TARGET_NUMBER", "")

WHATSAPP_BRIDGE_URL = os.getenv("WHATSAPP_BRIDGE_URL", "http://localhost:3001")
WHATSAPP_POLL_SECONDS = int(os.getenv("WHATSAPP_POLL_SECONDS", "5"))

# Give the WhatsApp web page a moment to settle before sending
SEND_DELAY_SECONDS = float(os.getenv("SEND_DELAY_SECONDS", "5"))
