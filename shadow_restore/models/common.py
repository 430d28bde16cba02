"""Core shared models."""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, field_validator


class TimeBucket(str, Enum):
    MORNING = "Morning"
    NOON = "Noon"
    EVENING = "Evening"

    @property
    def hour(self) -> int:
        return _BUCKET_HOURS[self]


_BUCKET_HOURS = {
    TimeBucket.MORNING: 8,
    TimeBucket.NOON: 13,
    TimeBucket.EVENING: 18,
}


class DriveAddress(BaseModel):
    """Administrative drive share, e.g. ``D$``."""

    kind: Literal["drive"] = "drive"
    letter: str

    @field_validator("letter")
    @classmethod
    def _normalize_letter(cls, v: str) -> str:
        letter = v.strip().rstrip("$:").upper()
        if len(letter) != 1 or not ("A" <= letter <= "Z"):
            raise ValueError(f"drive must be a single letter, got {v!r}")
        return letter

    @property
    def segment(self) -> str:
        return f"{self.letter}$"


class ShareAddress(BaseModel):
    """Named SMB share on the remote system."""

    kind: Literal["share"] = "share"
    name: str

    @field_validator("name")
    @classmethod
    def _check_name(cls, v: str) -> str:
        name = v.strip()
        if not name:
            raise ValueError("share name must not be empty")
        if "\\" in name or "/" in name:
            raise ValueError(f"share name must not contain path separators, got {v!r}")
        return name

    @property
    def segment(self) -> str:
        return self.name


AddressingMode = Annotated[Union[DriveAddress, ShareAddress], Field(discriminator="kind")]
