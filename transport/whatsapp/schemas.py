"""
WhatsApp Transport Layer - Schemas

PURE DATA MODELS - NO LOGIC
Defines the HTTP contract for /send and the closed set of inbound
events the relay understands. Library event objects never cross this
boundary; the client adapter converts them first.
"""

from dataclasses import dataclass
from typing import Literal, Union

from pydantic import BaseModel, Field


DEFAULT_USER_SERVER = "s.whatsapp.net"


# ============================================================================
# HTTP CONTRACT (POST /send)
# ============================================================================

class SendRequest(BaseModel):
    """Body of POST /send."""

    jid: str = Field(..., min_length=1, description="Recipient phone number, no server suffix")
    text: str = Field(..., min_length=1, description="Message text")

    class Config:
        """Pydantic config."""
        frozen = True
        extra = "ignore"


class SendResponse(BaseModel):
    """Success body."""
    status: Literal["Message sent"] = "Message sent"


class ErrorResponse(BaseModel):
    """Every failure path returns exactly this shape."""
    error: str


# ============================================================================
# RECIPIENT
# ============================================================================

@dataclass(frozen=True)
class RecipientJID:
    """
    WhatsApp address: user part plus network server.

    Renders as ``user@server``.
    """

    user: str
    server: str = DEFAULT_USER_SERVER

    @classmethod
    def from_user(cls, user: str) -> "RecipientJID":
        return cls(user=user, server=DEFAULT_USER_SERVER)

    def __str__(self) -> str:
        return f"{self.user}@{self.server}"


# ============================================================================
# INBOUND EVENTS (closed union)
# ============================================================================

@dataclass(frozen=True)
class PlainText:
    """Simple conversation text."""
    text: str


@dataclass(frozen=True)
class ExtendedText:
    """Text with link preview, quote or mentions attached."""
    text: str


@dataclass(frozen=True)
class UnrecognizedBody:
    """Media, reactions, polls... anything the relay does not render."""


MessageBody = Union[PlainText, ExtendedText, UnrecognizedBody]


@dataclass(frozen=True)
class MessageEvent:
    sender: str  # full JID string, e.g. 1234@s.whatsapp.net
    body: MessageBody


@dataclass(frozen=True)
class ConnectedEvent:
    pass


@dataclass(frozen=True)
class OfflineSyncCompletedEvent:
    pass


@dataclass(frozen=True)
class LoggedOutEvent:
    reason: str = ""


@dataclass(frozen=True)
class DisconnectedEvent:
    pass


@dataclass(frozen=True)
class UnknownEvent:
    """Any library event without a dedicated variant."""
    kind: str


InboundEvent = Union[
    MessageEvent,
    ConnectedEvent,
    OfflineSyncCompletedEvent,
    LoggedOutEvent,
    DisconnectedEvent,
    UnknownEvent,
]


# ============================================================================
# PAIRING
# ============================================================================

@dataclass(frozen=True)
class PairingCode:
    """One QR payload to render. Rotates until scanned."""
    code: str


@dataclass(frozen=True)
class PairingResult:
    success: bool
    detail: str = ""
