import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

import config

logger = logging.getLogger(__name__)


def is_configured() -> bool:
    return bool(config.EMAIL_USER and config.EMAIL_PASS)


def send_html_mail(to_email: str, subject: str, html: str):
    """
    Sends a single HTML email through the configured SMTP server.

    Errors are raised to the caller.

    Args:
        to_email (str): Recipient address.
        subject (str): Subject line.
        html (str): HTML body.
    """
    msg = MIMEMultipart("alternative")
    msg["From"] = config.EMAIL_USER
    msg["To"] = to_email
    msg["Subject"] = subject
    msg.attach(MIMEText(html, "html"))

    with smtplib.SMTP_SSL(config.SMTP_HOST, config.SMTP_PORT) as server:
        server.login(config.EMAIL_USER, config.EMAIL_PASS)
        server.send_message(msg)


def send_confirmation_email(to_email: str, html: str):
    """
    Sends the RSVP confirmation mail. Failures are logged and dropped,
    the RSVP itself is already stored at this point.
    """
    try:
        logger.info("Sending confirmation email to %s", to_email)
        send_html_mail(to_email, config.EMAIL_SUBJECT, html)
        logger.info("Confirmation email sent to %s", to_email)
    except Exception as e:
        logger.warning("Email send failed for %s: %s", to_email, e)
