"""
Messaging Client abstract interface.

Role: the only seam between this service and the WhatsApp library.

Rules:
- Library types never leave the implementation
- Inbound events are delivered as schemas.InboundEvent values
- Failures raise MessagingClientError (no library exceptions leak)
- Implementations must be safe to call from several threads
"""

from abc import ABC, abstractmethod
from typing import Callable

from .schemas import InboundEvent, PairingCode, PairingResult, RecipientJID


EventHandler = Callable[[InboundEvent], None]
PairingCodeHandler = Callable[[PairingCode], None]
PairingResultHandler = Callable[[PairingResult], None]


class MessagingClientError(Exception):
    """The messaging library reported a failure."""
    pass


class MessagingClient(ABC):
    """
    Abstract WhatsApp client boundary.
    Relay, sender and bootstrap depend ONLY on this interface.
    """

    @abstractmethod
    def add_event_handler(self, handler: EventHandler) -> None:
        """Register a callback for every inbound event."""
        raise NotImplementedError

    @abstractmethod
    def add_pairing_handlers(
        self,
        on_code: PairingCodeHandler,
        on_result: PairingResultHandler,
    ) -> None:
        """
        Register callbacks for the one-time pairing flow.

        on_code fires for each QR payload while no device identity is
        stored; on_result fires once when pairing succeeds or fails.
        """
        raise NotImplementedError

    @abstractmethod
    def connect(self) -> None:
        """
        Connect using the stored device identity, pairing first if none.

        Returns once connected.

        Raises:
            MessagingClientError: connect or device load failed
        """
        raise NotImplementedError

    @abstractmethod
    def generate_message_id(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def send_text(self, recipient: RecipientJID, text: str) -> str:
        """
        Send a plain text message. Blocks until the server acknowledges.

        Returns:
            Message id assigned to the sent message

        Raises:
            MessagingClientError: send failed
        """
        raise NotImplementedError
