"""Input-layer public API.

Exports the closed key vocabulary, low-level terminal decoding (``read_key``),
and the small registry used by modal key handlers.
"""

from .key_registry import KeyBinding, KeyRegistry
from .keys import Key, KeyName
from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, read_key

__all__ = [
    "ESC_SEQUENCE_TIMEOUT_MS",
    "Key",
    "KeyBinding",
    "KeyName",
    "KeyRegistry",
    "_PENDING_BYTES",
    "read_key",
]
