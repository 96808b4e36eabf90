# arkio

Value types, data models, key utilities and small network helpers for
working with the Ark blockchain from Python.

## Installation

```
pip install arkio
```

To run the test suite:

```
pip install "arkio[test]"
pytest
```

## Modules

- `arkio.types`: the value types `Address` (34 characters), `Hash`
  (64 characters), `Publickey` (66 characters) and `Signature`
  (142 characters). A value of any other length is stored as an empty string.
  `Balance` holds an amount both as an arktoshi string and as an ark string
  with eight decimal places: `"100000000"` becomes `"1.00000000"` and
  `"10000000"` becomes `".10000000"`. A value that is not made only of digits
  leaves both empty.
- Models, each a frozen dataclass with a readable `str()`:
  `arkio.block.Block`, `arkio.currency.Currency`, `arkio.delegate.Delegate`,
  `arkio.fees.Fees`, `arkio.peer.Peer`, `arkio.network.Network`,
  `arkio.transaction.Transaction`, `arkio.voter.Voter` and
  `arkio.account.Account`. Plain strings passed for typed fields are turned
  into the matching value type, and text fields are cut to their fixed sizes.
  `arkio.network` also has the `NetworkType` enum and the `Bip32` and
  `NetworkParams` records.
- `arkio.crypto`: `get_private_key` (SHA-256 of a passphrase),
  `get_public_key` and `get_keys` (secp256k1, compressed or not), `to_wif` and
  `from_wif`, `get_address` (Base58Check of a network byte and the RIPEMD-160
  of a public key), `create_account` and `make_account`, and the hex helpers
  `hex_str` and `parse_hex`.
- `arkio.http`: `HttpClient.get(peer, port, request)` sends an HTTP/1.1 GET
  and returns the body; any status other than 200 raises `HttpError`.
  `make_http()` returns a client with the default timeout.
- `arkio.json_reader`: `make_json_string(text)` parses a document into a
  `JsonDocument` whose `value_for`, `value_in`, `subvalue_for` and
  `subarray_value_in` return string values as they are and any other value
  as compact JSON.
- `arkio.platform`: `convert_to_int`, `convert_to_float`, `substring_count`
  and `generate_random_number`.

## Example

```python
from arkio.types import Balance
from arkio.crypto import get_keys, get_address, hex_str

balance = Balance("12984403000000000")
print(balance.ark)        # 129844030.00000000
print(balance.arktoshi)   # 12984403000000000

private_key, public_key = get_keys("secret")
print(hex_str(public_key))
print(get_address(0x1E, public_key))
```

```python
from arkio.json_reader import make_json_string

doc = make_json_string('{"success": true, "fee": "10000000"}')
print(doc.value_for("fee"))      # 10000000
print(doc.value_for("success"))  # true
```

## What it does not do

There is no client for a node's API: nothing here looks up accounts, blocks,
delegates or transactions on a live network. The models only hold data you
pass in, and `HttpClient` and `JsonDocument` are the building blocks for
fetching and reading responses yourself. There is no mnemonic generator, so
`make_account` needs a passphrase to be given. Transactions are not built or
signed, and there is no command-line tool.