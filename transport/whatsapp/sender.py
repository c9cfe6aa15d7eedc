"""
WhatsApp Message Sender

Sends one outbound text message through the messaging client.
No formatting intelligence. No retries. No logic.
"""

import asyncio
import logging

from .client import MessagingClient
from .schemas import RecipientJID

logger = logging.getLogger(__name__)

SEND_TIMEOUT_S = 60.0


class SendError(Exception):
    """Failed to send a message to WhatsApp."""
    pass


class SendTimeoutError(SendError):
    """The client did not confirm the send in time."""
    pass


class SendTransportError(SendError):
    """The client reported a failure (network, auth, unknown recipient...)."""
    pass


class SendOrchestrator:
    """
    Builds the recipient JID and performs exactly one send per call.

    The client call blocks, so it runs in a worker thread. On timeout
    the caller stops waiting; cleanup of the in-flight send belongs to
    the client library.
    """

    def __init__(self, client: MessagingClient, timeout_s: float = SEND_TIMEOUT_S):
        self.client = client
        self.timeout_s = timeout_s

    async def send(self, recipient: str, text: str) -> str:
        """
        Send `text` to `recipient`.

        Args:
            recipient: Phone number without server suffix
            text: Message body

        Returns:
            Message id reported by the client

        Raises:
            ValueError: Empty recipient or text
            SendTimeoutError: No confirmation within timeout_s
            SendTransportError: Client failure
        """
        if not recipient or not text:
            raise ValueError("recipient and text must be non-empty")

        target = RecipientJID.from_user(recipient)

        try:
            # The library assigns its own id on send; this one is only logged.
            draft_id = self._call_client(self.client.generate_message_id)
            logger.debug(f"Sending to {target} (draft id {draft_id})")

            message_id = await asyncio.wait_for(
                asyncio.to_thread(self._call_client, self.client.send_text, target, text),
                timeout=self.timeout_s,
            )
        except SendTransportError as e:
            logger.error(
                f"Failed to send message: {e}",
                exc_info=True,
                extra={"recipient": str(target)},
            )
            raise
        except asyncio.TimeoutError:
            # Only the wait_for deadline reaches here; client errors are wrapped above
            logger.error(
                f"Failed to send message: no confirmation after {self.timeout_s:g}s",
                extra={"recipient": str(target)},
            )
            raise SendTimeoutError(
                f"Timed out after {self.timeout_s:g}s waiting for send confirmation"
            )

        logger.info(f"Message sent, ID: {message_id}")
        return message_id

    @staticmethod
    def _call_client(method, *args):
        """Run a client call, wrapping any failure as SendTransportError."""
        try:
            return method(*args)
        except Exception as e:
            raise SendTransportError(str(e) or type(e).__name__) from e
