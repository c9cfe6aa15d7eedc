"""
WhatsApp client backed by neonize (Python binding of whatsmeow).

Requires: pip install neonize
Device identity and session keys live in the library's SQLite store;
the first run without a stored identity goes through QR pairing.
"""

import logging
import threading
from typing import List, Optional

from .client import (
    EventHandler,
    MessagingClient,
    MessagingClientError,
    PairingCodeHandler,
    PairingResultHandler,
)
from .schemas import (
    ConnectedEvent,
    DisconnectedEvent,
    ExtendedText,
    InboundEvent,
    LoggedOutEvent,
    MessageBody,
    MessageEvent,
    OfflineSyncCompletedEvent,
    PairingCode,
    PairingResult,
    PlainText,
    RecipientJID,
    UnknownEvent,
    UnrecognizedBody,
)

try:
    from neonize.client import NewClient
    from neonize.events import (
        EVENT_TO_INT,
        ConnectedEv,
        DisconnectedEv,
        LoggedOutEv,
        MessageEv,
        OfflineSyncCompletedEv,
        PairStatusEv,
    )
    from neonize.utils import build_jid
    from neonize.utils.jid import Jid2String
    NEONIZE_AVAILABLE = True
except ImportError:
    NEONIZE_AVAILABLE = False

logger = logging.getLogger(__name__)

# Handled by the pairing callbacks or internal to the library
NON_DISPATCHED_EVENTS = {"Device", "QREv", "PairStatusEv"}


def dispatched_event_types() -> list:
    """Every neonize event class routed to the relay."""
    return [
        event_type
        for event_type in EVENT_TO_INT
        if event_type.__name__ not in NON_DISPATCHED_EVENTS
    ]


def convert_message_body(message) -> MessageBody:
    """Map a waE2E.Message proto onto the relay's body variants."""
    if message.conversation:
        return PlainText(text=message.conversation)
    if message.HasField("extendedTextMessage"):
        return ExtendedText(text=message.extendedTextMessage.text)
    return UnrecognizedBody()


def convert_event(event) -> InboundEvent:
    """Map a neonize event object onto the closed InboundEvent union."""
    if isinstance(event, MessageEv):
        return MessageEvent(
            sender=Jid2String(event.Info.MessageSource.Sender),
            body=convert_message_body(event.Message),
        )
    if isinstance(event, ConnectedEv):
        return ConnectedEvent()
    if isinstance(event, OfflineSyncCompletedEv):
        return OfflineSyncCompletedEvent()
    if isinstance(event, LoggedOutEv):
        return LoggedOutEvent(reason=str(event.Reason))
    if isinstance(event, DisconnectedEv):
        return DisconnectedEvent()
    return UnknownEvent(kind=type(event).__name__)


class NeonizeMessagingClient(MessagingClient):
    """
    MessagingClient over neonize.NewClient.

    neonize runs its connection loop in blocking calls and dispatches
    events from its own thread; connect() runs the loop on a daemon
    thread and returns after the first Connected event.
    """

    def __init__(self, db_path: str = "whatsmeow.db", connect_timeout_s: float = 300.0):
        if not NEONIZE_AVAILABLE:
            raise ImportError(
                "neonize not installed. Install with: pip install neonize"
            )

        self.db_path = db_path
        self.connect_timeout_s = connect_timeout_s
        self.client = NewClient(db_path)

        self._handlers: List[EventHandler] = []
        self._on_code: Optional[PairingCodeHandler] = None
        self._on_result: Optional[PairingResultHandler] = None
        self._connected = threading.Event()
        self._connect_error: Optional[BaseException] = None
        self._thread: Optional[threading.Thread] = None

        self._register_library_callbacks()

    # ------------------------------------------------------------------
    # Library wiring
    # ------------------------------------------------------------------

    def _register_library_callbacks(self) -> None:
        # Every kind reaches the relay; unconverted ones log as "Unhandled event"
        for event_type in dispatched_event_types():
            self.client.event(event_type)(self._dispatch)

        self.client.event(PairStatusEv)(self._on_pair_status)
        self.client.event.qr(self._on_qr)

    def _dispatch(self, _client, event) -> None:
        converted = convert_event(event)
        if isinstance(converted, ConnectedEvent):
            self._connected.set()
        for handler in self._handlers:
            handler(converted)

    def _on_qr(self, _client, data_qr: bytes) -> None:
        if self._on_code is None:
            logger.warning("Pairing code received but no handler registered")
            return
        self._on_code(PairingCode(code=data_qr.decode("utf-8")))

    def _on_pair_status(self, _client, event) -> None:
        error = event.Error
        result = PairingResult(success=not error, detail=error or "success")
        if self._on_result is not None:
            self._on_result(result)

    def _run(self) -> None:
        try:
            self.client.connect()
        except Exception as e:
            self._connect_error = e
            self._connected.set()

    # ------------------------------------------------------------------
    # MessagingClient
    # ------------------------------------------------------------------

    def add_event_handler(self, handler: EventHandler) -> None:
        self._handlers.append(handler)

    def add_pairing_handlers(
        self,
        on_code: PairingCodeHandler,
        on_result: PairingResultHandler,
    ) -> None:
        self._on_code = on_code
        self._on_result = on_result

    def connect(self) -> None:
        logger.info(f"Connecting with device store {self.db_path}")
        self._thread = threading.Thread(
            target=self._run, name="neonize-connect", daemon=True
        )
        self._thread.start()

        if not self._connected.wait(timeout=self.connect_timeout_s):
            raise MessagingClientError(
                f"Not connected after {self.connect_timeout_s:.0f}s"
            )
        if self._connect_error is not None:
            raise MessagingClientError(
                f"Failed to connect: {self._connect_error}"
            ) from self._connect_error

    def generate_message_id(self) -> str:
        return self.client.generate_message_id()

    def send_text(self, recipient: RecipientJID, text: str) -> str:
        target = build_jid(recipient.user, recipient.server)
        try:
            response = self.client.send_message(target, text)
        except Exception as e:
            raise MessagingClientError(str(e) or type(e).__name__) from e
        return response.ID
