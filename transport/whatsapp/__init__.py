"""WhatsApp Transport Layer - Module Exports"""

from .client import MessagingClient, MessagingClientError
from .pairing import TerminalPairingRenderer
from .relay import EventRelay
from .routes import router
from .schemas import (
    ConnectedEvent,
    DisconnectedEvent,
    ErrorResponse,
    ExtendedText,
    InboundEvent,
    LoggedOutEvent,
    MessageEvent,
    OfflineSyncCompletedEvent,
    PairingCode,
    PairingResult,
    PlainText,
    RecipientJID,
    SendRequest,
    SendResponse,
    UnknownEvent,
    UnrecognizedBody,
)
from .sender import (
    SEND_TIMEOUT_S,
    SendError,
    SendOrchestrator,
    SendTimeoutError,
    SendTransportError,
)
from .stub import StubMessagingClient

__all__ = [
    # Schemas
    "SendRequest",
    "SendResponse",
    "ErrorResponse",
    "RecipientJID",
    "InboundEvent",
    "MessageEvent",
    "PlainText",
    "ExtendedText",
    "UnrecognizedBody",
    "ConnectedEvent",
    "OfflineSyncCompletedEvent",
    "LoggedOutEvent",
    "DisconnectedEvent",
    "UnknownEvent",
    "PairingCode",
    "PairingResult",
    # Client
    "MessagingClient",
    "MessagingClientError",
    "StubMessagingClient",
    # Relay
    "EventRelay",
    # Pairing
    "TerminalPairingRenderer",
    # Sender
    "SEND_TIMEOUT_S",
    "SendOrchestrator",
    "SendError",
    "SendTimeoutError",
    "SendTransportError",
    # Router
    "router",
]
