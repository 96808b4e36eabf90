"""Peer model: a node on the network."""

from __future__ import annotations

from dataclasses import dataclass

_IP_SIZE = 40
_FIELD_SIZE = 32


def _fit(text: str, size: int) -> str:
    """Keep text within a buffer of size bytes, terminator included."""
    data = text.encode("utf-8")
    if len(data) < size:
        return text
    return data[: size - 1].decode("utf-8", "ignore")


@dataclass(frozen=True)
class Peer:
    """A network peer with its reported state."""

    ip: str
    port: int
    version: str
    errors: int
    os: str
    height: str
    status: str
    delay: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "ip", _fit(self.ip, _IP_SIZE))
        for name in ("version", "os", "height", "status"):
            object.__setattr__(self, name, _fit(getattr(self, name), _FIELD_SIZE))

    def __str__(self) -> str:
        return (
            f"ip: {self.ip}"
            f"\nport: {self.port}"
            f"\nversion: {self.version}"
            f"\nerrors: {self.errors}"
            f"\nos: {self.os}"
            f"\nheight: {self.height}"
            f"\nstatus: {self.status}"
            f"\ndelay: {self.delay}"
        )