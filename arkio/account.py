"""Account model as reported by a node or derived from a passphrase."""

from __future__ import annotations

from dataclasses import dataclass, field

from .types import Address, Balance, Publickey


def _coerce(kind, value):
    return value if isinstance(value, kind) else kind(value)


@dataclass(frozen=True)
class Account:
    """An account with its balances, public keys and signature flags."""

    address: Address = field(default_factory=Address)
    unconfirmed_balance: Balance = field(default_factory=Balance)
    balance: Balance = field(default_factory=Balance)
    public_key: Publickey = field(default_factory=Publickey)
    unconfirmed_signature: int = 0
    second_signature: int = 0
    second_public_key: Publickey = field(default_factory=Publickey)

    def __post_init__(self) -> None:
        typed = {
            "address": Address,
            "unconfirmed_balance": Balance,
            "balance": Balance,
            "public_key": Publickey,
            "second_public_key": Publickey,
        }
        for name, kind in typed.items():
            object.__setattr__(self, name, _coerce(kind, getattr(self, name)))

    def __str__(self) -> str:
        return (
            f"address: {self.address.value}"
            f"\nunconfirmedBalance: {self.unconfirmed_balance.ark}"
            f"\nbalance: {self.balance.ark}"
            f"\npublicKey: {self.public_key.value}"
            f"\nunconfirmedSignature: {self.unconfirmed_signature}"
            f"\nsecondSignature: {self.second_signature}"
            f"\nsecondPublicKey: {self.second_public_key.value}"
        )