"""
Configuration management for the WhatsApp relay.

Loads environment variables from .env file and provides typed access to configuration.
Messaging backend settings live in infra.config.InfraConfig.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
env_path = Path(__file__).parent / ".env"
load_dotenv(env_path)


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Config:
    """Configuration class for the WhatsApp relay."""

    # HTTP API (port is fixed, not read from the environment)
    HOST = "0.0.0.0"
    PORT = 8080

    # Outbound sends
    SEND_TIMEOUT_S = 60.0

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()

    # Environment
    ENVIRONMENT = os.getenv("ENVIRONMENT", "development")

    @classmethod
    def validate(cls) -> bool:
        """Validate that configuration values are usable."""
        if cls.LOG_LEVEL not in LOG_LEVELS:
            print(f"⚠️  Unknown LOG_LEVEL '{cls.LOG_LEVEL}', falling back to DEBUG")
            print(f"   Expected one of: {', '.join(LOG_LEVELS)}")
            return False

        return True


if __name__ == "__main__":
    # Test configuration loading
    print("Configuration loaded:")
    print(f"  Port: {Config.PORT}")
    print(f"  Log Level: {Config.LOG_LEVEL}")
    print(f"  Environment: {Config.ENVIRONMENT}")
    print(f"\n  Validation: {'✓ PASSED' if Config.validate() else '✗ FAILED'}")
