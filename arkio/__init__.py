"""Value types, data models, key utilities and HTTP and JSON helpers for the Ark blockchain."""

__version__ = "0.1.0"
__all__ = [
    "types",
    "platform",
    "block",
    "currency",
    "delegate",
    "fees",
    "peer",
    "network",
    "transaction",
    "voter",
    "http",
    "json_reader",
    "account",
    "crypto",
]