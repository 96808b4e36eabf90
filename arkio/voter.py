"""Voter model: an account voting for a delegate."""

from __future__ import annotations

from dataclasses import dataclass, field

from .types import Address, Balance, Publickey

_USERNAME_SIZE = 64


def _fit(text: str, size: int) -> str:
    """Keep text within a buffer of size bytes, terminator included."""
    data = text.encode("utf-8")
    if len(data) < size:
        return text
    return data[: size - 1].decode("utf-8", "ignore")


def _coerce(kind, value):
    return value if isinstance(value, kind) else kind(value)


@dataclass(frozen=True)
class Voter:
    """A voter with its username, address, public key and balance."""

    username: str = ""
    address: Address = field(default_factory=Address)
    public_key: Publickey = field(default_factory=Publickey)
    balance: Balance = field(default_factory=Balance)

    def __post_init__(self) -> None:
        object.__setattr__(self, "username", _fit(self.username, _USERNAME_SIZE))
        object.__setattr__(self, "address", _coerce(Address, self.address))
        object.__setattr__(self, "public_key", _coerce(Publickey, self.public_key))
        object.__setattr__(self, "balance", _coerce(Balance, self.balance))

    def __str__(self) -> str:
        return (
            f"\nusername: {self.username}"
            f"\naddress: {self.address.value}"
            f"\npublicKey: {self.public_key.value}"
            f"\nbalance.ark: {self.balance.ark}"
        )