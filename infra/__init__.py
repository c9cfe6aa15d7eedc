"""
Infrastructure module exports.

Configuration and bootstrap for the messaging backend.
"""

from .config import InfraConfig, get_config, MessagingBackendType
from .bootstrap import BootstrapError, InfraBootstrap, bootstrap_infrastructure

__all__ = [
    "InfraConfig",
    "get_config",
    "MessagingBackendType",
    "BootstrapError",
    "InfraBootstrap",
    "bootstrap_infrastructure",
]
