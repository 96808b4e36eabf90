"""Transaction model as reported by a node."""

from __future__ import annotations

from dataclasses import dataclass, field

from .types import Address, Balance, Hash, Publickey, Signature

TRANSACTION_MAX_SIZE = 600

_FIELD_SIZE = 32
_WIDE_FIELD_SIZE = 64


def _fit(text: str, size: int) -> str:
    """Keep text within a buffer of size bytes, terminator included."""
    data = text.encode("utf-8")
    if len(data) < size:
        return text
    return data[: size - 1].decode("utf-8", "ignore")


def _coerce(kind, value):
    return value if isinstance(value, kind) else kind(value)


@dataclass(frozen=True)
class Transaction:
    """A transaction; id and signature are kept only when of valid length."""

    id: str = ""
    block_id: str = ""
    height: str = ""
    type: int = 0
    timestamp: str = ""
    amount: Balance = field(default_factory=Balance)
    fee: Balance = field(default_factory=Balance)
    vendor_field: str = ""
    sender_id: Address = field(default_factory=Address)
    recipient_id: Address = field(default_factory=Address)
    sender_publickey: Publickey = field(default_factory=Publickey)
    signature: str = ""
    confirmations: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "id", Hash(self.id).value)
        object.__setattr__(self, "signature", Signature(self.signature).value)
        for name in ("block_id", "height", "timestamp"):
            object.__setattr__(self, name, _fit(getattr(self, name), _FIELD_SIZE))
        for name in ("vendor_field", "confirmations"):
            object.__setattr__(self, name, _fit(getattr(self, name), _WIDE_FIELD_SIZE))
        typed = {
            "amount": Balance,
            "fee": Balance,
            "sender_id": Address,
            "recipient_id": Address,
            "sender_publickey": Publickey,
        }
        for name, kind in typed.items():
            object.__setattr__(self, name, _coerce(kind, getattr(self, name)))

    def __str__(self) -> str:
        return (
            f"\nid: {self.id}"
            f"\nblockid: {self.block_id}"
            f"\nheight: {self.height}"
            f"\ntype: {self.type}"
            f"\ntimestamp: {self.timestamp}"
            f"\namount: {self.amount.ark}"
            f"\nfee: {self.fee.ark}"
            f"\nvendorField: {self.vendor_field}"
            f"\nsenderId: {self.sender_id.value}"
            f"\nrecipientId: {self.recipient_id.value}"
            f"\nsenderPublicKey: {self.sender_publickey.value}"
            f"\nsignature: {self.signature}"
            f"\nconfirmations: {self.confirmations}"
        )