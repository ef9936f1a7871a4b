# =============================================================================
# MIME Packaging
# =============================================================================
# Builds a ready-to-send multipart/alternative message from a rendered
# template. Sending it (SMTP, an ESP API, ...) is up to the caller.
#
# Part order matters: clients show the LAST alternative they understand,
# so the plain-text part goes first and the HTML part second.
# =============================================================================

import logging
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import formataddr, formatdate, make_msgid

logger = logging.getLogger(__name__)


def build_email_message(
    html: str,
    text: str,
    *,
    subject: str,
    sender: str,
    recipients: list[str],
    sender_name: str = "",
    message_id: str | None = None,
) -> MIMEMultipart:
    """
    Build a MIME message with text and HTML alternatives.

    Args:
        html: Rendered HTML document.
        text: Plain-text alternative.
        subject: Subject line.
        sender: Sender email address.
        recipients: To addresses.
        sender_name: Display name for the From header.
        message_id: Message-ID to use. Generated from the sender's domain if None.

    Returns:
        MIMEMultipart message ready to send.

    Raises:
        ValueError: If there are no recipients.
    """
    if not recipients:
        raise ValueError("No recipients specified")

    msg = MIMEMultipart("alternative")
    msg.attach(MIMEText(text, "plain", "utf-8"))
    msg.attach(MIMEText(html, "html", "utf-8"))

    # Set headers
    msg["From"] = formataddr((sender_name, sender))
    msg["To"] = ", ".join(recipients)
    msg["Subject"] = subject
    msg["Date"] = formatdate(localtime=True)
    if message_id is None:
        domain = sender.split("@")[1] if "@" in sender else None
        message_id = make_msgid(domain=domain)
    msg["Message-ID"] = message_id

    # User agent
    msg["X-Mailer"] = "Mailsmith"

    logger.debug(f"Built message {message_id} for {', '.join(recipients)}")
    return msg
