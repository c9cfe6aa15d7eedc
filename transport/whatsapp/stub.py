"""
Stub messaging client for testing and offline development.

Deterministic, never touches the network.
"""

import threading
import uuid
from typing import List, Optional, Tuple

from .client import (
    EventHandler,
    MessagingClient,
    MessagingClientError,
    PairingCodeHandler,
    PairingResultHandler,
)
from .schemas import ConnectedEvent, InboundEvent, RecipientJID


class StubMessagingClient(MessagingClient):
    """
    Fake WhatsApp client.

    - Records every send in `sent`
    - Returns `message_id` (or a random id) from send_text
    - Raises MessagingClientError when `fail_with` is set (`fail_id_with`
      for generate_message_id, `fail_connect` for connect)
    - Blocks in send_text while `block_sends` is set, until `release()`
    """

    def __init__(
        self,
        message_id: Optional[str] = None,
        fail_with: Optional[str] = None,
        fail_connect: Optional[str] = None,
        fail_id_with: Optional[str] = None,
    ):
        self.message_id = message_id
        self.fail_with = fail_with
        self.fail_connect = fail_connect
        self.fail_id_with = fail_id_with
        self.block_sends = False
        self.connected = False
        self.sent: List[Tuple[RecipientJID, str]] = []
        self.handlers: List[EventHandler] = []
        self.pairing_handlers: List[Tuple[PairingCodeHandler, PairingResultHandler]] = []
        self._released = threading.Event()
        self._lock = threading.Lock()

    @property
    def send_count(self) -> int:
        return len(self.sent)

    def add_event_handler(self, handler: EventHandler) -> None:
        self.handlers.append(handler)

    def add_pairing_handlers(
        self,
        on_code: PairingCodeHandler,
        on_result: PairingResultHandler,
    ) -> None:
        self.pairing_handlers.append((on_code, on_result))

    def connect(self) -> None:
        if self.fail_connect:
            raise MessagingClientError(self.fail_connect)
        self.connected = True
        self.emit(ConnectedEvent())

    def emit(self, event: InboundEvent) -> None:
        """Deliver an event to every registered handler."""
        for handler in self.handlers:
            handler(event)

    def generate_message_id(self) -> str:
        if self.fail_id_with:
            raise MessagingClientError(self.fail_id_with)
        return uuid.uuid4().hex.upper()[:16]

    def send_text(self, recipient: RecipientJID, text: str) -> str:
        with self._lock:
            self.sent.append((recipient, text))

        if self.block_sends:
            self._released.wait()

        if self.fail_with:
            raise MessagingClientError(self.fail_with)

        return self.message_id or self.generate_message_id()

    def release(self) -> None:
        """Unblock any send waiting on block_sends."""
        self._released.set()
