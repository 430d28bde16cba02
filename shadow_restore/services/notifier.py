"""E-mail notification once restored data is in place."""

import html
import logging
import smtplib
from email.message import EmailMessage
from pathlib import PurePosixPath, PureWindowsPath
from typing import Optional

from ..config import Settings, settings as default_settings
from ..errors import NotifierConfigError
from ..models.restore import NotifyOutcome, OutcomeStatus

logger = logging.getLogger(__name__)


def destination_link(destination: str) -> str:
    """``file:`` URI for absolute destinations, the raw string otherwise."""
    win = PureWindowsPath(destination)
    if win.is_absolute():
        uri = win.as_uri()
        # a bare \\host\share keeps its root slash
        if win.drive.startswith("\\\\") and len(win.parts) == 1:
            uri = uri.rstrip("/")
        return uri
    posix = PurePosixPath(destination)
    if posix.is_absolute():
        return posix.as_uri()
    return destination


class Notifier:
    def __init__(self, cfg: Optional[Settings] = None):
        self.cfg = cfg or default_settings

    def ensure_configured(self) -> None:
        missing = [
            name
            for name, value in (("smtp_host", self.cfg.smtp_host), ("mail_sender", self.cfg.mail_sender))
            if not value
        ]
        if missing:
            raise NotifierConfigError(
                "E-mail notification requested but "
                + ", ".join(f"SHADOW_RESTORE_{m.upper()}" for m in missing)
                + " not set"
            )

    def compose(
        self,
        recipient: str,
        system: str,
        creation_timestamp: str,
        destination: str,
    ) -> EmailMessage:
        link = destination_link(destination)
        msg = EmailMessage()
        msg["Subject"] = f"Restore complete: {system} snapshot from {creation_timestamp}"
        msg["From"] = self.cfg.mail_sender
        msg["To"] = recipient
        msg.set_content(
            f"Data restored from {system} as of {creation_timestamp} is available at {destination}"
        )
        msg.add_alternative(
            "<html><body>"
            f"<p>Data restored from {html.escape(system)} as of "
            f"{html.escape(creation_timestamp)} is available at "
            f'<a href="{html.escape(link, quote=True)}">{html.escape(destination)}</a>.</p>'
            "</body></html>",
            subtype="html",
        )
        return msg

    def notify(
        self,
        recipient: Optional[str],
        system: str,
        creation_timestamp: str,
        destination: str,
    ) -> NotifyOutcome:
        if not recipient:
            return NotifyOutcome(status=OutcomeStatus.SKIPPED, reason="no recipient")

        self.ensure_configured()
        msg = self.compose(recipient, system, creation_timestamp, destination)
        try:
            with smtplib.SMTP(self.cfg.smtp_host, self.cfg.smtp_port, timeout=30) as smtp:
                smtp.send_message(msg)
        except (smtplib.SMTPException, OSError) as e:
            logger.warning(f"E-mail notification to {recipient} failed: {e}")
            return NotifyOutcome(status=OutcomeStatus.FAILED, recipient=recipient, reason=str(e))

        logger.info(f"Notification sent to {recipient}")
        return NotifyOutcome(status=OutcomeStatus.SUCCESS, recipient=recipient)
