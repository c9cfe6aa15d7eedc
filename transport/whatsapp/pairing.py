"""
QR pairing output.

Renders pairing codes as scannable half-block QR codes on a terminal
and logs the final pairing result. Only used when no device identity
is stored yet.
"""

import logging
import sys
from typing import Optional, TextIO

import segno

from .schemas import PairingCode, PairingResult

logger = logging.getLogger(__name__)


class TerminalPairingRenderer:
    """Prints each QR code to `out` (stdout by default)."""

    def __init__(self, out: Optional[TextIO] = None):
        self.out = out if out is not None else sys.stdout

    def on_code(self, code: PairingCode) -> None:
        logger.info("Scan the QR code below with WhatsApp > Linked devices")
        qr = segno.make_qr(code.code, error="l")
        qr.terminal(out=self.out, compact=True)
        self.out.flush()

    def on_result(self, result: PairingResult) -> None:
        if result.success:
            logger.info(f"QR Channel result: {result.detail or 'success'}")
        else:
            logger.error(f"QR Channel result: {result.detail}")
