import smtplib
from abc import ABC, abstractmethod
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Optional

from helpdesk.logging_config import get_logger

logger = get_logger("mailer_service")

LIVE_CHAT_SUBJECT = "You've got a customer waiting in live chat"
LIVE_CHAT_BODY = (
    "A customer has been handed over from the assistant and is waiting for a real person.\n\n"
    "Open your dashboard to join the conversation."
)


class Notifier(ABC):
    @abstractmethod
    def notify(self, address: str) -> bool:
        """Alert the owner that a chat needs a human. Never raises."""
        pass


class SmtpMailer(Notifier):
    """Send live chat alerts over SMTP."""

    def __init__(
        self,
        host: str,
        port: int = 587,
        username: Optional[str] = None,
        password: Optional[str] = None,
        from_email: str = "noreply@localhost",
        timeout_seconds: float = 10.0,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.from_email = from_email
        self.timeout_seconds = timeout_seconds

    @property
    def configured(self) -> bool:
        return bool(self.username and self.password)

    def notify(self, address: str) -> bool:
        if not self.configured:
            logger.warning(f"SMTP not configured, skipping live chat alert to {address}")
            return False

        msg = MIMEMultipart()
        msg["From"] = self.from_email
        msg["To"] = address
        msg["Subject"] = LIVE_CHAT_SUBJECT
        msg.attach(MIMEText(LIVE_CHAT_BODY, "plain", "utf-8"))

        try:
            with smtplib.SMTP(self.host, self.port, timeout=self.timeout_seconds) as server:
                server.starttls()
                server.login(self.username, self.password)
                server.send_message(msg)
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"Failed to send live chat alert: {e}", extra={"context": {"to": address}})
            return False

        logger.info("Live chat alert sent", extra={"context": {"to": address}})
        return True
