import smtplib
from unittest.mock import MagicMock, patch

from helpdesk.services.mailer_service import LIVE_CHAT_SUBJECT, SmtpMailer


def _mailer():
    return SmtpMailer(host="smtp.test", port=587, username="user", password="secret", from_email="bot@acme.test")


class TestSmtpMailer:
    def test_not_configured_skips_send(self):
        with patch("helpdesk.services.mailer_service.smtplib.SMTP") as mock_smtp:
            assert SmtpMailer(host="smtp.test").notify("owner@acme.test") is False
            mock_smtp.assert_not_called()

    @patch("helpdesk.services.mailer_service.smtplib.SMTP")
    def test_sends_alert(self, mock_smtp):
        server = MagicMock()
        mock_smtp.return_value.__enter__.return_value = server

        assert _mailer().notify("owner@acme.test") is True

        server.starttls.assert_called_once()
        server.login.assert_called_once_with("user", "secret")
        msg = server.send_message.call_args[0][0]
        assert msg["To"] == "owner@acme.test"
        assert msg["Subject"] == LIVE_CHAT_SUBJECT

    @patch("helpdesk.services.mailer_service.smtplib.SMTP")
    def test_smtp_failure_returns_false(self, mock_smtp):
        server = MagicMock()
        server.login.side_effect = smtplib.SMTPAuthenticationError(535, b"bad credentials")
        mock_smtp.return_value.__enter__.return_value = server

        assert _mailer().notify("owner@acme.test") is False

    @patch("helpdesk.services.mailer_service.smtplib.SMTP")
    def test_connection_failure_returns_false(self, mock_smtp):
        mock_smtp.side_effect = ConnectionRefusedError()

        assert _mailer().notify("owner@acme.test") is False
