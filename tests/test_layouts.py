import pytest
from construct import Int64ul, Struct
from solders.keypair import Keypair
from solders.pubkey import Pubkey

from spl_token_metadata.errors import EncodingError
from spl_token_metadata.layouts import Option, PublicKey, String, Vec, ZeroablePublicKey
from spl_token_metadata.layouts.primitives import field_from_path
from spl_token_metadata.utils import to_pubkey


def test_string_is_u32_length_prefixed():
    assert String().build("my-key") == b"\x06\x00\x00\x00my-key"
    assert String().build("") == b"\x00\x00\x00\x00"


def test_string_counts_utf8_bytes_not_characters():
    data = String().build("né")
    assert data[:4] == (3).to_bytes(4, "little")
    assert String().parse(data) == "né"


def test_string_rejects_non_str():
    layout = Struct("symbol" / String())
    with pytest.raises(EncodingError) as exc:
        layout.build({"symbol": 42})
    assert exc.value.field == "symbol"


def test_public_key_is_32_raw_bytes():
    key = Keypair().pubkey()
    assert PublicKey().build(key) == bytes(key)
    assert PublicKey().parse(bytes(key)) == key


def test_public_key_accepts_base58_string():
    key = Keypair().pubkey()
    assert PublicKey().build(str(key)) == bytes(key)


def test_public_key_rejects_wrong_length():
    layout = Struct("new_authority" / PublicKey())
    with pytest.raises(EncodingError) as exc:
        layout.build({"new_authority": b"\x01" * 31})
    assert exc.value.field == "new_authority"


def test_option_absent_is_single_zero_byte():
    layout = Option(Int64ul)
    assert layout.build(None) == b"\x00"
    assert layout.parse(b"\x00") is None


def test_option_present():
    layout = Option(Int64ul)
    assert layout.build(5) == b"\x01" + (5).to_bytes(8, "little")
    assert layout.parse(layout.build(2 ** 64 - 1)) == 2 ** 64 - 1


def test_option_of_zero_length_vec_differs_from_absent():
    layout = Option(Vec(Int64ul))
    assert layout.build([]) == b"\x01\x00\x00\x00\x00"
    assert layout.build(None) == b"\x00"


def test_zeroable_public_key():
    key = Keypair().pubkey()
    assert ZeroablePublicKey().build(None) == bytes(32)
    assert ZeroablePublicKey().parse(bytes(32)) is None
    assert ZeroablePublicKey().parse(bytes(key)) == key


def test_field_from_path():
    assert field_from_path("(building) -> uses -> total") == "total"
    assert field_from_path("(building)") == "value"
    assert field_from_path(None, default="emit") == "emit"


def test_to_pubkey():
    key = Keypair().pubkey()
    assert to_pubkey(key) is key
    assert to_pubkey(bytes(key)) == key
    assert to_pubkey(str(key)) == key
    with pytest.raises(EncodingError):
        to_pubkey("not-a-key!")
    with pytest.raises(EncodingError):
        to_pubkey(1234)
    assert to_pubkey("11111111111111111111111111111111") == Pubkey.default()
