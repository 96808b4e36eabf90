"""Transaction fee schedule."""

from __future__ import annotations

from dataclasses import dataclass

from .types import Balance


def _coerce(value):
    return value if isinstance(value, Balance) else Balance(value)


@dataclass(frozen=True)
class Fees:
    """Fees charged for each kind of transaction."""

    send: Balance
    vote: Balance
    delegate: Balance
    second_signature: Balance
    multi_signature: Balance

    def __post_init__(self) -> None:
        for name in ("send", "vote", "delegate", "second_signature", "multi_signature"):
            object.__setattr__(self, name, _coerce(getattr(self, name)))

    def __str__(self) -> str:
        return (
            f"\nsend: {self.send.ark}"
            f"\nvote: {self.vote.ark}"
            f"\ndelegate: {self.delegate.ark}"
            f"\nsecondsignature: {self.second_signature.ark}"
            f"\nmultisignature: {self.multi_signature.ark}"
        )