"""Wire types exchanged between hishtory clients and the backend."""

from __future__ import annotations

import base64
import json
import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Sequence, TypeVar

T = TypeVar("T")

DATE_ONLY = "%Y-%m-%d"

ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)

_TIME_RE = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?(Z|[+-]\d{2}:\d{2})$",
    re.ASCII,
)


def _format_time(value: datetime) -> str:
    """Format a datetime as RFC 3339 with trailing fractional zeros removed."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    text = (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )
    if value.microsecond:
        text += "." + f"{value.microsecond:06d}".rstrip("0")
    offset = value.utcoffset() or timedelta(0)
    if offset == timedelta(0):
        return text + "Z"
    sign = "+" if offset > timedelta(0) else "-"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{text}{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def _parse_time(text: str | None) -> datetime:
    """Parse an RFC 3339 timestamp; a missing value gives the zero time."""
    if text is None:
        return ZERO_TIME
    match = _TIME_RE.match(text)
    if match is None:
        raise ValueError(f"invalid timestamp: {text!r}")
    year, month, day, hour, minute, second, fraction, zone = match.groups()
    micros = int((fraction or "").ljust(6, "0")[:6])
    if zone == "Z":
        tz = timezone.utc
    else:
        hours, mins = zone[1:].split(":")
        delta = timedelta(hours=int(hours), minutes=int(mins))
        tz = timezone(delta if zone[0] == "+" else -delta)
    return datetime(
        int(year), int(month), int(day), int(hour), int(minute), int(second), micros, tzinfo=tz
    )


def _encode_bytes(value: bytes) -> str:
    return base64.b64encode(value).decode("ascii")


def _decode_bytes(value: str | None) -> bytes:
    return base64.b64decode(value) if value else b""


@dataclass
class EncHistoryEntry:
    """An encrypted history entry as stored by the backend.

    ``device_id`` is the device that will read the entry, not the one that
    recorded it. ``date`` equals the entry's end time.
    """

    encrypted_data: bytes = b""
    nonce: bytes = b""
    device_id: str = ""
    user_id: str = ""
    date: datetime = ZERO_TIME
    encrypted_id: str = ""
    read_count: int = 0
    is_from_same_device: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "enc_data": _encode_bytes(self.encrypted_data),
            "nonce": _encode_bytes(self.nonce),
            "device_id": self.device_id,
            "user_id": self.user_id,
            "time": _format_time(self.date),
            "encrypted_id": self.encrypted_id,
            "read_count": self.read_count,
            "is_from_same_device": self.is_from_same_device,
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> EncHistoryEntry:
        return cls(
            encrypted_data=_decode_bytes(raw.get("enc_data")),
            nonce=_decode_bytes(raw.get("nonce")),
            device_id=raw.get("device_id", ""),
            user_id=raw.get("user_id", ""),
            date=_parse_time(raw.get("time")),
            encrypted_id=raw.get("encrypted_id", ""),
            read_count=raw.get("read_count", 0),
            is_from_same_device=raw.get("is_from_same_device", False),
        )


@dataclass
class DumpRequest:
    """A request to send all history entries to a newly bootstrapped device."""

    user_id: str = ""
    requesting_device_id: str = ""
    request_time: datetime = ZERO_TIME


@dataclass
class UpdateInfo:
    """Where release binaries and their attestations can be downloaded."""

    linux_amd64_url: str = ""
    linux_amd64_attestation_url: str = ""
    linux_arm64_url: str = ""
    linux_arm64_attestation_url: str = ""
    linux_arm7_url: str = ""
    linux_arm7_attestation_url: str = ""
    darwin_amd64_url: str = ""
    darwin_amd64_unsigned_url: str = ""
    darwin_amd64_attestation_url: str = ""
    darwin_arm64_url: str = ""
    darwin_arm64_unsigned_url: str = ""
    darwin_arm64_attestation_url: str = ""
    version: str = ""


@dataclass
class MessageIdentifier:
    """Identifies one history entry without carrying the command itself."""

    device_id: str = ""
    end_time: datetime = ZERO_TIME
    entry_id: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "device_id": self.device_id,
            "date": _format_time(self.end_time),
            "entry_id": self.entry_id,
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> MessageIdentifier:
        return cls(
            device_id=raw.get("device_id", ""),
            end_time=_parse_time(raw.get("date")),
            entry_id=raw.get("entry_id", ""),
        )


@dataclass
class MessageIdentifiers:
    """A list of history entries that should be deleted."""

    ids: list[MessageIdentifier] = field(default_factory=list)

    def _to_dict(self) -> dict[str, Any]:
        return {"message_ids": [ident.to_dict() for ident in self.ids]}

    @classmethod
    def _from_dict(cls, raw: dict[str, Any] | None) -> MessageIdentifiers:
        items = (raw or {}).get("message_ids") or []
        return cls(ids=[MessageIdentifier.from_dict(item) for item in items])

    def to_json(self) -> bytes:
        """Serialize for storage in a JSONB column."""
        return json.dumps(self._to_dict()).encode("utf-8")

    @classmethod
    def from_json(cls, value: Any) -> MessageIdentifiers:
        """Load from a JSONB column value, which must be bytes."""
        if not isinstance(value, (bytes, bytearray)):
            raise TypeError(f"failed to unmarshal JSONB value: {value!r}")
        return cls._from_dict(json.loads(bytes(value)))


@dataclass
class DeletionRequest:
    """A request, queued once per device, to delete some history entries."""

    user_id: str = ""
    destination_device_id: str = ""
    send_time: datetime = ZERO_TIME
    messages: MessageIdentifiers = field(default_factory=MessageIdentifiers)
    read_count: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "user_id": self.user_id,
            "destination_device_id": self.destination_device_id,
            "send_time": _format_time(self.send_time),
            "messages": self.messages._to_dict(),
            "read_count": self.read_count,
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> DeletionRequest:
        return cls(
            user_id=raw.get("user_id", ""),
            destination_device_id=raw.get("destination_device_id", ""),
            send_time=_parse_time(raw.get("send_time")),
            messages=MessageIdentifiers._from_dict(raw.get("messages")),
            read_count=raw.get("read_count", 0),
        )


@dataclass
class Feedback:
    """User feedback submitted on uninstall."""

    user_id: str
    date: datetime
    feedback: str = ""


@dataclass
class SubmitResponse:
    """Pending dump and deletion requests returned when entries are submitted."""

    dump_requests: list[DumpRequest] = field(default_factory=list)
    deletion_requests: list[DeletionRequest] = field(default_factory=list)


def chunks(items: Sequence[T], chunk_size: int) -> list[list[T]]:
    """Split ``items`` into consecutive lists of at most ``chunk_size`` items."""
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    return [list(items[start : start + chunk_size]) for start in range(0, len(items), chunk_size)]