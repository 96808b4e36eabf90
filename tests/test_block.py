import pytest

from arkio.block import Block
from arkio.types import Balance

SIGNATURE = (
    "3045022100e0fc6b066209fd9a70e61372cda2e38431ace5cf79ee0557eb2b1b14315d70f3"
    "02201978696b71c9a177fa1ce9480ceb1ad04a15471d4c6e8d5b2dcd6d931f350efe"
)
PAYLOAD_HASH = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
GENERATOR_KEY = "03127001718bee76f14133272f0f4a928ffa8c2b38cafd94d7100253dac732c644"
GENERATOR_ID = "D9rv3h61heDYHQ3b3Xk3V5epHSTTC6Vn1d"


def make_block(**overrides):
    values = dict(
        id="5907849310697169543",
        version=0,
        timestamp="27400752",
        height="2467562",
        previous_block="7012858385202614513",
        number_of_transactions="0",
        total_amount="0",
        total_fee="0",
        reward="200000000",
        payload_length="0",
        payload_hash=PAYLOAD_HASH,
        generator_public_key=GENERATOR_KEY,
        generator_id=GENERATOR_ID,
        block_signature=SIGNATURE,
        confirmations="3",
        total_forged="200000000",
    )
    values.update(overrides)
    return Block(**values)


def test_construct_block():
    block = make_block()
    assert block.id == "5907849310697169543"
    assert block.version == 0
    assert block.timestamp == "27400752"
    assert block.height == "2467562"
    assert block.previous_block == "7012858385202614513"
    assert block.number_of_transactions == "0"
    assert block.total_amount.arktoshi == "0"
    assert block.total_fee.arktoshi == "0"
    assert block.reward.arktoshi == "200000000"
    assert block.payload_length == "0"
    assert block.payload_hash.value == PAYLOAD_HASH
    assert block.generator_public_key.value == GENERATOR_KEY
    assert block.generator_id.value == GENERATOR_ID
    assert block.block_signature.value == SIGNATURE
    assert block.confirmations == "3"
    assert block.total_forged.arktoshi == "200000000"


def test_block_str():
    expected = "\n".join(
        [
            "id: 5907849310697169543",
            "version: 0",
            "timestamp: 27400752",
            "height: 2467562",
            "previousBlock: 7012858385202614513",
            "numberOfTransactions: 0",
            "totalAmount: 0",
            "totalFee: 0",
            "reward: 2.00000000",
            "payloadLength: 0",
            f"payloadHash: {PAYLOAD_HASH}",
            f"generatorPublicKey: {GENERATOR_KEY}",
            f"generatorId: {GENERATOR_ID}",
            f"blockSignature: {SIGNATURE}",
            "confirmations: 3",
            "totalForged: 2.00000000",
        ]
    )
    assert str(make_block()) == expected


def test_accepts_typed_balance():
    block = make_block(reward=Balance("100000000"))
    assert block.reward.ark == "1.00000000"


def test_invalid_fixed_values_are_empty():
    block = make_block(generator_id="short", payload_hash="abc", block_signature="30")
    assert block.generator_id.value == ""
    assert block.payload_hash.value == ""
    assert block.block_signature.value == ""


def test_long_id_is_truncated():
    block = make_block(id="9" * 50)
    assert block.id == "9" * 39


def test_block_is_frozen():
    block = make_block()
    with pytest.raises(AttributeError):
        block.version = 3
    assert block.version == 0