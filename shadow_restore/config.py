"""Application settings."""

from datetime import datetime
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    host: str = "127.0.0.1"
    port: int = 8788
    debug: bool = False

    # Mail relay; both must be set before a notification can be requested
    smtp_host: Optional[str] = None
    smtp_port: int = 25
    mail_sender: Optional[str] = None

    # "{host}" in any argument is replaced with the target system
    listing_command: list[str] = [
        "powershell",
        "-NoProfile",
        "-NonInteractive",
        "-Command",
        "Invoke-Command -ComputerName {host} -ScriptBlock { vssadmin list shadows }",
    ]
    listing_marker: str = "creation time:"
    listing_timeout: float = 60.0

    date_formats: list[str] = ["%Y-%m-%d", "%m/%d/%Y", "%d.%m.%Y"]
    snapshot_time_formats: list[str] = [
        "%m/%d/%Y %I:%M:%S %p",
        "%m/%d/%Y %H:%M:%S",
        "%Y-%m-%d %H:%M:%S",
    ]

    # Snapshots created before the cutover recorded local time one hour off
    dst_cutover: Optional[datetime] = datetime(2019, 3, 10)
    dst_shift_hours: float = -1.0
    local_timezone: Optional[str] = None

    verify_checksums: bool = True

    model_config = {"env_prefix": "SHADOW_RESTORE_"}

    @property
    def mail_configured(self) -> bool:
        return bool(self.smtp_host and self.mail_sender)


settings = Settings()
