"""Delegate model as reported by a node."""

from __future__ import annotations

from dataclasses import dataclass

from .types import Address, Balance, Publickey

_USERNAME_SIZE = 20


def _fit(text: str, size: int) -> str:
    """Keep text within a buffer of size bytes, terminator included."""
    data = text.encode("utf-8")
    if len(data) < size:
        return text
    return data[: size - 1].decode("utf-8", "ignore")


def _coerce(kind, value):
    return value if isinstance(value, kind) else kind(value)


@dataclass(frozen=True)
class Delegate:
    """A forging delegate with its vote weight and performance."""

    username: str
    address: Address
    public_key: Publickey
    vote: Balance
    produced_blocks: int
    missed_blocks: int
    rate: int
    approval: float
    productivity: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "username", _fit(self.username, _USERNAME_SIZE))
        object.__setattr__(self, "address", _coerce(Address, self.address))
        object.__setattr__(self, "public_key", _coerce(Publickey, self.public_key))
        object.__setattr__(self, "vote", _coerce(Balance, self.vote))

    def __str__(self) -> str:
        lines = [
            f"username: {self.username}",
            f"address: {self.address.value}",
            f"publicKey: {self.public_key.value}",
            f"vote: {self.vote.ark}",
            f"producedblocks: {self.produced_blocks}",
            f"missedblocks: {self.missed_blocks}",
            f"rate: {self.rate}",
            f"approval: {format(self.approval, '.2g')}%",
            f"productivity: {format(self.productivity, '.2g')}%",
        ]
        return "\n".join(lines)