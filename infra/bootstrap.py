"""
Infrastructure initialization and bootstrap.

Creates the messaging client, wires the event relay and pairing
output into it, and connects. Everything downstream receives the
connected client explicitly.
"""

import logging
from typing import Optional

from transport.whatsapp.client import MessagingClient
from transport.whatsapp.pairing import TerminalPairingRenderer
from transport.whatsapp.relay import EventRelay

from .config import InfraConfig, get_config

logger = logging.getLogger(__name__)


class BootstrapError(Exception):
    """Client could not be created or connected. Fatal at startup."""
    pass


class InfraBootstrap:
    """
    Bootstrap infrastructure based on configuration.

    One instance per process, created in main.run().
    """

    def __init__(
        self,
        config: Optional[InfraConfig] = None,
        relay: Optional[EventRelay] = None,
        pairing: Optional[TerminalPairingRenderer] = None,
    ):
        """Initialize bootstrap with configuration."""
        self.config = config or get_config()
        self.relay = relay or EventRelay(logging.getLogger("transport.whatsapp.events"))
        self.pairing = pairing or TerminalPairingRenderer()
        self.client: Optional[MessagingClient] = None

    def start(self) -> MessagingClient:
        """
        Create, wire and connect the messaging client.

        Returns:
            Connected MessagingClient

        Raises:
            BootstrapError: client creation, device load or connect failed
        """
        logger.info(f"Starting messaging backend: {self.config.messaging_backend}")

        try:
            client = self.config.create_messaging_client()
        except Exception as e:
            raise BootstrapError(f"Failed to create client: {e}") from e

        client.add_event_handler(self.relay.on_event)
        client.add_pairing_handlers(self.pairing.on_code, self.pairing.on_result)

        try:
            client.connect()
        except Exception as e:
            raise BootstrapError(f"Failed to connect: {e}") from e

        self.client = client
        return client

    def __repr__(self) -> str:
        return (
            f"InfraBootstrap(messaging={self.config.messaging_backend}, "
            f"store={self.config.whatsapp_db_path}, "
            f"connected={self.client is not None})"
        )


def bootstrap_infrastructure(config: Optional[InfraConfig] = None) -> MessagingClient:
    """
    Bootstrap the messaging client.

    Args:
        config: Optional custom configuration

    Returns:
        Connected MessagingClient
    """
    return InfraBootstrap(config).start()
