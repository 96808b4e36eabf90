"""Key derivation, WIF encoding, addresses and hex helpers."""

from __future__ import annotations

import hashlib
import re
from typing import Iterable, Tuple

from Crypto.Hash import RIPEMD160
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from .account import Account

PUBLIC_KEY_SIZE = 65
COMPRESSED_PUBLIC_KEY_SIZE = 33
PRIVATE_KEY_SIZE = 32

_CURVE_ORDER = int("FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141", 16)
_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_HEX_PAIR = re.compile(r"[ \t\n\v\f\r]*([0-9a-fA-F]{2})")


def hex_str(data: Iterable[int], spaces: bool = False) -> str:
    """Lower-case hex of data, with a space between bytes when spaces is set."""
    raw = bytes(data)
    return raw.hex(" ") if spaces else raw.hex()


def parse_hex(text: str) -> bytes:
    """Read hex byte pairs, skipping whitespace before each; stop at anything else."""
    out = bytearray()
    pos = 0
    while (match := _HEX_PAIR.match(text, pos)) is not None:
        out.append(int(match.group(1), 16))
        pos = match.end()
    return bytes(out)


def _checksum(payload: bytes) -> bytes:
    return hashlib.sha256(hashlib.sha256(payload).digest()).digest()[:4]


def _b58encode(data: bytes) -> str:
    number = int.from_bytes(data, "big")
    chars = []
    while number:
        number, rest = divmod(number, 58)
        chars.append(_ALPHABET[rest])
    zeros = len(data) - len(data.lstrip(b"\0"))
    return "1" * zeros + "".join(reversed(chars))


def _b58decode(text: str) -> bytes:
    number = 0
    for char in text:
        digit = _ALPHABET.find(char)
        if digit < 0:
            raise ValueError(f"invalid Base58 character {char!r}")
        number = number * 58 + digit
    zeros = len(text) - len(text.lstrip("1"))
    return b"\0" * zeros + number.to_bytes((number.bit_length() + 7) // 8, "big")


def _b58check_encode(payload: bytes) -> str:
    return _b58encode(payload + _checksum(payload))


def _b58check_decode(text: str) -> bytes:
    raw = _b58decode(text)
    if len(raw) < 4:
        raise ValueError("Base58Check data too short")
    payload, check = raw[:-4], raw[-4:]
    if _checksum(payload) != check:
        raise ValueError("Base58Check checksum mismatch")
    return payload


def _check_byte(value: int, what: str) -> None:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{what} {value} is not a byte")


def _private_value(private_key: bytes) -> int:
    if len(private_key) != PRIVATE_KEY_SIZE:
        raise ValueError(f"private key must be {PRIVATE_KEY_SIZE} bytes")
    value = int.from_bytes(private_key, "big")
    if not 1 <= value < _CURVE_ORDER:
        raise ValueError("private key is outside the curve order")
    return value


def get_private_key(passphrase: str) -> bytes:
    """Private key of a passphrase: the SHA-256 of its UTF-8 bytes."""
    return hashlib.sha256(passphrase.encode("utf-8")).digest()


def get_public_key(private_key: bytes, compressed: bool = True) -> bytes:
    """secp256k1 public key, 33 bytes compressed or 65 bytes with a 0x04 prefix."""
    key = ec.derive_private_key(_private_value(bytes(private_key)), ec.SECP256K1())
    point = PublicFormat.CompressedPoint if compressed else PublicFormat.UncompressedPoint
    return key.public_key().public_bytes(Encoding.X962, point)


def get_keys(passphrase: str, compressed: bool = True) -> Tuple[bytes, bytes]:
    """Private and public key derived from a passphrase."""
    private_key = get_private_key(passphrase)
    return private_key, get_public_key(private_key, compressed)


def to_wif(version: int, key: bytes, compressed: bool = True) -> str:
    """Encode a private key in Wallet Import Format."""
    _check_byte(version, "version")
    key = bytes(key)
    _private_value(key)
    payload = bytes([version]) + key + (b"\x01" if compressed else b"")
    return _b58check_encode(payload)


def from_wif(wif: str) -> Tuple[int, bytes, bool]:
    """Decode a WIF string into (version, private key, compressed)."""
    payload = _b58check_decode(wif)
    if len(payload) == PRIVATE_KEY_SIZE + 1:
        compressed = False
    elif len(payload) == PRIVATE_KEY_SIZE + 2 and payload[-1] == 0x01:
        compressed = True
    else:
        raise ValueError("not a WIF private key")
    key = payload[1 : PRIVATE_KEY_SIZE + 1]
    _private_value(key)
    return payload[0], key, compressed


def get_address(network: int, public_key: bytes) -> str:
    """Base58Check address: network byte and RIPEMD-160 of the public key."""
    _check_byte(network, "network")
    digest = RIPEMD160.new(bytes(public_key)).digest()
    return _b58check_encode(bytes([network]) + digest)


def create_account(network: int, passphrase: str) -> Account:
    """Account holding the compressed public key and address of a passphrase."""
    _, public_key = get_keys(passphrase)
    return Account(public_key=hex_str(public_key), address=get_address(network, public_key))


def make_account(network: int, passphrase: str) -> Account:
    """Create an account on network from passphrase."""
    return create_account(network, passphrase)