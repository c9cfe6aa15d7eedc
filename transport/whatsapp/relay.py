"""
WhatsApp Event Relay

Turns inbound client events into log lines.
No state. No replies. No retained references.
"""

import logging

from .schemas import (
    ConnectedEvent,
    DisconnectedEvent,
    ExtendedText,
    InboundEvent,
    LoggedOutEvent,
    MessageEvent,
    OfflineSyncCompletedEvent,
    PlainText,
    UnknownEvent,
)


STATUS_LINES = {
    ConnectedEvent: "Connected to WhatsApp",
    OfflineSyncCompletedEvent: "Offline sync completed",
    LoggedOutEvent: "Logged out",
    DisconnectedEvent: "Disconnected",
}


class EventRelay:
    """
    Dispatches each inbound event to exactly one log line.

    Invoked on the client's dispatch thread, so it must never raise
    and never block.
    """

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def on_event(self, event: InboundEvent) -> None:
        try:
            self.logger.info(self.describe(event))
        except Exception as e:
            self.logger.error(f"Failed to relay event: {e}", exc_info=True)

    def describe(self, event: InboundEvent) -> str:
        """Render the log line for an event."""
        if isinstance(event, MessageEvent):
            return self._describe_message(event)

        status_line = STATUS_LINES.get(type(event))
        if status_line is not None:
            return status_line

        if isinstance(event, UnknownEvent):
            return f"Unhandled event: {event.kind}"

        # Outside the union entirely
        return f"Unhandled event: {type(event).__name__}"

    @staticmethod
    def _describe_message(event: MessageEvent) -> str:
        body = event.body
        if isinstance(body, (PlainText, ExtendedText)):
            return f"Received message from {event.sender}: {body.text}"
        return (
            f"Received a message from {event.sender}, "
            f"but could not determine its type"
        )
