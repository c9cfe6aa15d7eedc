"""
Test suite for infrastructure bootstrap.

Verifies:
- Configuration reads environment with defaults
- Stub backend bootstraps without network
- Relay and pairing handlers are wired before connect
- Connect/creation failures raise BootstrapError
"""

import logging

import pytest

from infra import BootstrapError, InfraBootstrap, InfraConfig, bootstrap_infrastructure
from transport.whatsapp.schemas import MessageEvent, PlainText
from transport.whatsapp.stub import StubMessagingClient


def stub_config() -> InfraConfig:
    return InfraConfig(
        messaging_backend="stub",
        whatsapp_db_path="test.db",
        connect_timeout_s=1.0,
    )


class TestInfraConfig:
    """Test infrastructure configuration."""

    def test_config_from_env_defaults(self, monkeypatch):
        monkeypatch.delenv("MESSAGING_BACKEND", raising=False)
        monkeypatch.delenv("WHATSAPP_DB_PATH", raising=False)
        monkeypatch.delenv("WHATSAPP_CONNECT_TIMEOUT_S", raising=False)

        config = InfraConfig.from_env()

        assert config.messaging_backend == "neonize"
        assert config.whatsapp_db_path == "whatsmeow.db"
        assert config.connect_timeout_s == 300.0

    def test_config_from_env_overrides(self, monkeypatch):
        monkeypatch.setenv("MESSAGING_BACKEND", "stub")
        monkeypatch.setenv("WHATSAPP_DB_PATH", "/var/lib/relay/device.db")
        monkeypatch.setenv("WHATSAPP_CONNECT_TIMEOUT_S", "45")

        config = InfraConfig.from_env()

        assert config.messaging_backend == "stub"
        assert config.whatsapp_db_path == "/var/lib/relay/device.db"
        assert config.connect_timeout_s == 45.0

    def test_config_creates_stub_client(self):
        client = stub_config().create_messaging_client()

        assert isinstance(client, StubMessagingClient)


class TestInfraBootstrap:
    """Test bootstrap wiring."""

    def test_stub_bootstrap_connects(self):
        client = bootstrap_infrastructure(stub_config())

        assert isinstance(client, StubMessagingClient)
        assert client.connected is True

    def test_relay_registered_before_connect(self, caplog):
        caplog.set_level(logging.INFO, logger="transport.whatsapp.events")

        InfraBootstrap(stub_config()).start()

        # StubMessagingClient emits ConnectedEvent from connect()
        assert "Connected to WhatsApp" in caplog.text

    def test_inbound_messages_reach_relay(self, caplog):
        caplog.set_level(logging.INFO, logger="transport.whatsapp.events")
        client = InfraBootstrap(stub_config()).start()

        client.emit(MessageEvent(sender="1234@s.whatsapp.net", body=PlainText(text="hello")))

        assert "Received message from 1234@s.whatsapp.net: hello" in caplog.text

    def test_pairing_handlers_registered(self):
        bootstrap = InfraBootstrap(stub_config())
        client = bootstrap.start()

        assert len(client.pairing_handlers) == 1
        on_code, on_result = client.pairing_handlers[0]
        assert on_code == bootstrap.pairing.on_code
        assert on_result == bootstrap.pairing.on_result

    def test_connect_failure_is_bootstrap_error(self):
        config = stub_config()
        config.create_messaging_client = lambda: StubMessagingClient(  # type: ignore
            fail_connect="device store is locked"
        )

        with pytest.raises(BootstrapError) as exc_info:
            InfraBootstrap(config).start()

        assert "device store is locked" in str(exc_info.value)

    def test_client_creation_failure_is_bootstrap_error(self):
        config = stub_config()

        def broken():
            raise ImportError("neonize not installed")

        config.create_messaging_client = broken  # type: ignore

        with pytest.raises(BootstrapError):
            InfraBootstrap(config).start()

    def test_repr_shows_backend(self):
        bootstrap = InfraBootstrap(stub_config())

        assert "messaging=stub" in repr(bootstrap)
        assert "connected=False" in repr(bootstrap)
