"""Value types for addresses, balances, hashes, public keys and signatures."""

from __future__ import annotations

_DIGITS = frozenset("0123456789")


def _byte_length(text: str) -> int:
    return len(text.encode("utf-8"))


class _FixedText:
    """Text value of a fixed length; a value of any other length is stored empty."""

    LENGTH = 0
    __slots__ = ("_value",)

    def __init__(self, value: str = "") -> None:
        self._value = value if _byte_length(value) == self.LENGTH else ""

    @property
    def value(self) -> str:
        return self._value

    def __str__(self) -> str:
        return self._value

    def __bool__(self) -> bool:
        return bool(self._value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))


class Address(_FixedText):
    """A 34-character Base58 address."""

    LENGTH = 34
    __slots__ = ()

    def __init__(self, value: str = "") -> None:
        super().__init__(value)

    def __str__(self) -> str:
        return self._value


class Hash(_FixedText):
    """A 64-character hex-encoded SHA-256 hash."""

    LENGTH = 64
    __slots__ = ()

    def __init__(self, value: str = "") -> None:
        super().__init__(value)

    def __str__(self) -> str:
        return self._value


class Publickey(_FixedText):
    """A 66-character hex-encoded compressed public key."""

    LENGTH = 66
    __slots__ = ()

    def __init__(self, value: str = "") -> None:
        super().__init__(value)

    def __str__(self) -> str:
        return self._value


class Signature(_FixedText):
    """A 142-character hex-encoded DER signature."""

    LENGTH = 142
    __slots__ = ()

    def __init__(self, value: str = "") -> None:
        super().__init__(value)

    def __str__(self) -> str:
        return self._value


class Balance:
    """An amount held both in arktoshi and as a decimal ark string.

    One ark is 10**8 arktoshi. A value that is not made only of digits
    leaves both representations empty.
    """

    DECIMAL_PLACES = 8
    __slots__ = ("_arktoshi", "_ark")

    def __init__(self, value: str = "0") -> None:
        self._arktoshi = ""
        self._ark = ""
        if all(ch in _DIGITS for ch in value):
            self._arktoshi, self._ark = self._split(value)

    @classmethod
    def _split(cls, value: str) -> tuple[str, str]:
        if value == "0":
            return "0", "0"
        places = cls.DECIMAL_PLACES
        if len(value) < places:
            ark = "." + value.rjust(places, "0")
        else:
            ark = value[:-places] + "." + value[-places:]
        return value, ark

    @property
    def arktoshi(self) -> str:
        return self._arktoshi

    @property
    def ark(self) -> str:
        return self._ark

    def __str__(self) -> str:
        return self._ark

    def __repr__(self) -> str:
        return f"Balance({self._arktoshi!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Balance):
            return NotImplemented
        return (self._arktoshi, self._ark) == (other._arktoshi, other._ark)

    def __hash__(self) -> int:
        return hash((self._arktoshi, self._ark))