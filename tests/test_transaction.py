import pytest

from arkio.transaction import Transaction

TX_ID = "f93b1b635eaaeea21b26ebf1e10f62dc8874add6592737a1540d28ec9432eaa9"
SENDER = "DAYS6o9sA51kMCSaSP216GZ8pomGkRsQiR"
RECIPIENT = "D7FyqZohN83vxQdqUjJWqD2CPQBxhut9WD"
SENDER_KEY = "039b5a3a71335bfa6c72b82498f814123e0678f7cd3d8e7221ec7124918736e01c"
SIGNATURE = (
    "3045022100f632a89be97cb928cef6358b1a6c0e5b44381288ffe3f977768052c39f44c311"
    "02200cdfb289240ba03628d6b487d3869881de981322a8826bb5749704e6f6baa63b"
)


def make_transaction(**overrides):
    values = dict(
        id=TX_ID,
        block_id="14671461178414977683",
        height="1696504",
        type=0,
        timestamp="9656006",
        amount="51000",
        fee="10000000",
        vendor_field="vendorField",
        sender_id=SENDER,
        recipient_id=RECIPIENT,
        sender_publickey=SENDER_KEY,
        signature=SIGNATURE,
        confirmations="1868079",
    )
    values.update(overrides)
    return Transaction(**values)


def test_construct_transaction():
    transaction = make_transaction()
    assert transaction.id == TX_ID
    assert transaction.block_id == "14671461178414977683"
    assert transaction.height == "1696504"
    assert transaction.type == 0
    assert transaction.timestamp == "9656006"
    assert transaction.amount.arktoshi == "51000"
    assert transaction.fee.arktoshi == "10000000"
    assert transaction.vendor_field == "vendorField"
    assert transaction.sender_id.value == SENDER
    assert transaction.recipient_id.value == RECIPIENT
    assert transaction.sender_publickey.value == SENDER_KEY
    assert transaction.signature == SIGNATURE
    assert transaction.confirmations == "1868079"


def test_empty_transaction():
    transaction = Transaction()
    assert transaction.id == ""
    assert transaction.amount.arktoshi == "0"
    assert transaction.fee.ark == "0"
    assert transaction.sender_id.value == ""


def test_invalid_signature_is_empty():
    assert make_transaction(signature="3045").signature == ""


def test_invalid_id_is_empty():
    assert make_transaction(id="f93b").id == ""


def test_long_vendor_field_is_truncated():
    assert make_transaction(vendor_field="v" * 70).vendor_field == "v" * 63


def test_transaction_str():
    expected = (
        f"\nid: {TX_ID}"
        "\nblockid: 14671461178414977683"
        "\nheight: 1696504"
        "\ntype: 0"
        "\ntimestamp: 9656006"
        "\namount: .00051000"
        "\nfee: .10000000"
        "\nvendorField: vendorField"
        f"\nsenderId: {SENDER}"
        f"\nrecipientId: {RECIPIENT}"
        f"\nsenderPublicKey: {SENDER_KEY}"
        f"\nsignature: {SIGNATURE}"
        "\nconfirmations: 1868079"
    )
    assert str(make_transaction()) == expected


def test_transaction_is_frozen():
    with pytest.raises(AttributeError):
        make_transaction().type = 1