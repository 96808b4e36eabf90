"""Block model as reported by a node."""

from __future__ import annotations

from dataclasses import dataclass

from .types import Address, Balance, Hash, Publickey, Signature

_MAX_UINT128_CHARS = 40
_NUMBER_CHARS = 64


def _fit(text: str, size: int) -> str:
    """Keep text within a buffer of size bytes, terminator included."""
    data = text.encode("utf-8")
    if len(data) < size:
        return text
    return data[: size - 1].decode("utf-8", "ignore")


def _coerce(kind, value):
    return value if isinstance(value, kind) else kind(value)


@dataclass(frozen=True)
class Block:
    """A block; string fields are held as text, amounts as balances."""

    id: str
    version: int
    timestamp: str
    height: str
    previous_block: str
    number_of_transactions: str
    total_amount: Balance
    total_fee: Balance
    reward: Balance
    payload_length: str
    payload_hash: Hash
    generator_public_key: Publickey
    generator_id: Address
    block_signature: Signature
    confirmations: str
    total_forged: Balance

    def __post_init__(self) -> None:
        texts = {
            "id": _MAX_UINT128_CHARS,
            "timestamp": _MAX_UINT128_CHARS,
            "height": _NUMBER_CHARS,
            "previous_block": _MAX_UINT128_CHARS,
            "number_of_transactions": _NUMBER_CHARS,
            "payload_length": _NUMBER_CHARS,
            "confirmations": _NUMBER_CHARS,
        }
        for name, size in texts.items():
            object.__setattr__(self, name, _fit(getattr(self, name), size))
        typed = {
            "total_amount": Balance,
            "total_fee": Balance,
            "reward": Balance,
            "payload_hash": Hash,
            "generator_public_key": Publickey,
            "generator_id": Address,
            "block_signature": Signature,
            "total_forged": Balance,
        }
        for name, kind in typed.items():
            object.__setattr__(self, name, _coerce(kind, getattr(self, name)))

    def __str__(self) -> str:
        lines = [
            f"id: {self.id}",
            f"version: {self.version}",
            f"timestamp: {self.timestamp}",
            f"height: {self.height}",
            f"previousBlock: {self.previous_block}",
            f"numberOfTransactions: {self.number_of_transactions}",
            f"totalAmount: {self.total_amount.ark}",
            f"totalFee: {self.total_fee.ark}",
            f"reward: {self.reward.ark}",
            f"payloadLength: {self.payload_length}",
            f"payloadHash: {self.payload_hash.value}",
            f"generatorPublicKey: {self.generator_public_key.value}",
            f"generatorId: {self.generator_id.value}",
            f"blockSignature: {self.block_signature.value}",
            f"confirmations: {self.confirmations}",
            f"totalForged: {self.total_forged.ark}",
        ]
        return "\n".join(lines)