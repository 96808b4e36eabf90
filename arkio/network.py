"""Network model and network parameter records."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .types import Hash

_TOKEN_SIZE = 5
_SYMBOL_SIZE = 5
_EXPLORER_SIZE = 40


def _fit(text: str, size: int) -> str:
    """Keep text within a buffer of size bytes, terminator included."""
    data = text.encode("utf-8")
    if len(data) < size:
        return text
    return data[: size - 1].decode("utf-8", "ignore")


class NetworkType(IntEnum):
    """Kind of network a connection is made to."""

    INVALID = -1
    DEV = 0
    MAIN = 1
    CUSTOM = 2


@dataclass(frozen=True)
class Bip32:
    """BIP32 version prefixes for extended public and private keys."""

    pub: int
    priv: int


@dataclass(frozen=True)
class NetworkParams:
    """Address and key prefixes used by a network."""

    message_prefix: str
    bip32: Bip32
    pub_key_hash: int
    wif: int


@dataclass(frozen=True)
class Network:
    """A network described by its nethash, token, symbol, explorer and version."""

    nethash: Hash = Hash()
    token: str = ""
    symbol: str = ""
    explorer: str = ""
    version: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.nethash, Hash):
            object.__setattr__(self, "nethash", Hash(self.nethash))
        object.__setattr__(self, "token", _fit(self.token, _TOKEN_SIZE))
        object.__setattr__(self, "symbol", _fit(self.symbol, _SYMBOL_SIZE))
        object.__setattr__(self, "explorer", _fit(self.explorer, _EXPLORER_SIZE))

    def __str__(self) -> str:
        return (
            f"nethash: {self.nethash.value}"
            f"\ntoken: {self.token}"
            f"\nsymbol: {self.symbol}"
            f"\nexplorer: {self.explorer}"
            f"\nversion: {self.version}"
        )