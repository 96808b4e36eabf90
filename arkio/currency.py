"""Currency model: ticker, name and symbol."""

from __future__ import annotations

from dataclasses import dataclass

_TICKER_SIZE = 5
_NAME_SIZE = 20
_SYMBOL_SIZE = 4


def _fit(text: str, size: int) -> str:
    """Keep text within a buffer of size bytes, terminator included."""
    data = text.encode("utf-8")
    if len(data) < size:
        return text
    return data[: size - 1].decode("utf-8", "ignore")


@dataclass(frozen=True)
class Currency:
    """A currency with a short ticker, a name and a symbol."""

    ticker: str
    name: str
    symbol: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "ticker", _fit(self.ticker, _TICKER_SIZE))
        object.__setattr__(self, "name", _fit(self.name, _NAME_SIZE))
        object.__setattr__(self, "symbol", _fit(self.symbol, _SYMBOL_SIZE))

    def __str__(self) -> str:
        return f"ticker: {self.ticker}\nname: {self.name}\nsymbol: {self.symbol}"