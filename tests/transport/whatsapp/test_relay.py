"""
EventRelay Tests

Each inbound event produces exactly one log line.
"""

import logging

import pytest

from transport.whatsapp.relay import EventRelay
from transport.whatsapp.schemas import (
    ConnectedEvent,
    DisconnectedEvent,
    ExtendedText,
    LoggedOutEvent,
    MessageEvent,
    OfflineSyncCompletedEvent,
    PlainText,
    UnknownEvent,
    UnrecognizedBody,
)

LOGGER_NAME = "tests.relay"


@pytest.fixture
def relay():
    return EventRelay(logging.getLogger(LOGGER_NAME))


def relayed_lines(caplog) -> list:
    return [r.getMessage() for r in caplog.records if r.name == LOGGER_NAME]


class TestMessageEvents:
    def test_plain_text(self, relay, caplog):
        caplog.set_level(logging.INFO, logger=LOGGER_NAME)

        relay.on_event(MessageEvent(sender="1234@server", body=PlainText(text="hello")))

        assert relayed_lines(caplog) == ["Received message from 1234@server: hello"]

    def test_extended_text_uses_same_format(self, relay, caplog):
        caplog.set_level(logging.INFO, logger=LOGGER_NAME)

        relay.on_event(
            MessageEvent(
                sender="1234@s.whatsapp.net",
                body=ExtendedText(text="see https://example.com"),
            )
        )

        assert relayed_lines(caplog) == [
            "Received message from 1234@s.whatsapp.net: see https://example.com"
        ]

    def test_unrecognized_body(self, relay, caplog):
        caplog.set_level(logging.INFO, logger=LOGGER_NAME)

        relay.on_event(MessageEvent(sender="1234@server", body=UnrecognizedBody()))

        assert relayed_lines(caplog) == [
            "Received a message from 1234@server, but could not determine its type"
        ]


class TestStatusEvents:
    @pytest.mark.parametrize(
        "event,line",
        [
            (ConnectedEvent(), "Connected to WhatsApp"),
            (OfflineSyncCompletedEvent(), "Offline sync completed"),
            (LoggedOutEvent(reason="401"), "Logged out"),
            (DisconnectedEvent(), "Disconnected"),
        ],
    )
    def test_fixed_status_line(self, relay, caplog, event, line):
        caplog.set_level(logging.INFO, logger=LOGGER_NAME)

        relay.on_event(event)

        assert relayed_lines(caplog) == [line]


class TestUnknownEvents:
    def test_unknown_kind(self, relay, caplog):
        caplog.set_level(logging.INFO, logger=LOGGER_NAME)

        relay.on_event(UnknownEvent(kind="ReceiptEv"))

        assert relayed_lines(caplog) == ["Unhandled event: ReceiptEv"]

    def test_foreign_object_named_by_type(self, relay, caplog):
        caplog.set_level(logging.INFO, logger=LOGGER_NAME)

        class PresenceUpdate:
            pass

        relay.on_event(PresenceUpdate())  # type: ignore

        assert relayed_lines(caplog) == ["Unhandled event: PresenceUpdate"]

    def test_never_raises(self):
        class BrokenLogger(logging.Logger):
            def info(self, *args, **kwargs):
                raise RuntimeError("handler exploded")

        broken = BrokenLogger(LOGGER_NAME)
        relay = EventRelay(broken)

        # Must not propagate into the client's dispatch thread
        relay.on_event(ConnectedEvent())
