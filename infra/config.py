"""
Infrastructure configuration system.

Environment-based messaging backend selection with sensible defaults.
"""

import os
from dataclasses import dataclass
from typing import Literal

from transport.whatsapp.client import MessagingClient
from transport.whatsapp.stub import StubMessagingClient


MessagingBackendType = Literal["neonize", "stub"]


@dataclass
class InfraConfig:
    """Infrastructure configuration from environment."""

    messaging_backend: MessagingBackendType
    whatsapp_db_path: str
    connect_timeout_s: float

    @classmethod
    def from_env(cls) -> "InfraConfig":
        """
        Load configuration from environment variables.

        Defaults:
        - Messaging: neonize with whatsmeow.db in the working directory
        - Connect timeout: 300s, long enough to scan a pairing code
        """
        return cls(
            messaging_backend=os.getenv("MESSAGING_BACKEND", "neonize"),  # type: ignore
            whatsapp_db_path=os.getenv("WHATSAPP_DB_PATH", "whatsmeow.db"),
            connect_timeout_s=float(os.getenv("WHATSAPP_CONNECT_TIMEOUT_S", "300")),
        )

    def create_messaging_client(self) -> MessagingClient:
        """Create messaging client instance based on configuration."""
        if self.messaging_backend == "stub":
            return StubMessagingClient()

        # neonize loads its native library on import; only pay for it here
        from transport.whatsapp.neonize_client import NeonizeMessagingClient

        return NeonizeMessagingClient(
            db_path=self.whatsapp_db_path,
            connect_timeout_s=self.connect_timeout_s,
        )


def get_config() -> InfraConfig:
    """Get infrastructure configuration."""
    return InfraConfig.from_env()
