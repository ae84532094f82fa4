import requests
import os

BREVO_KEY = os.getenv("BREVO_API_KEY")
BREVO_URL = "https://api.brevo.com/v3/smtp/email"
SENDER_EMAIL = os.getenv("RECEIPTS_SENDER_EMAIL", "no-reply@expenzo.app")
SENDER_NAME = os.getenv("RECEIPTS_SENDER_NAME", "Expenzo")


class EmailDeliveryError(Exception):
     """The transactional email API is not configured or rejected the message."""


class EmailNotConfiguredError(EmailDeliveryError):
     """BREVO_API_KEY is missing; nothing can be sent."""


def email_configured() -> bool:
     return bool(BREVO_KEY)


def send_receipt_email(to_email: str, subject: str, html_content: str, to_name: str = None):
     if not BREVO_KEY:
          raise EmailNotConfiguredError("BREVO_API_KEY not configured")

     recipient = {"email": to_email}
     if to_name:
          recipient["name"] = to_name

     response = requests.post(
          BREVO_URL,
          headers={
               "api-key": BREVO_KEY,
               "Content-Type": "application/json",
          },
          json={
               "sender": {"name": SENDER_NAME, "email": SENDER_EMAIL},
               "to": [recipient],
               "subject": subject,
               "htmlContent": html_content,
          },
          timeout=10,
     )
     if response.status_code not in (200, 201):
          raise EmailDeliveryError(f"Brevo error: {response.text}")
