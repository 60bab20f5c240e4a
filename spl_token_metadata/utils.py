from solders.pubkey import Pubkey

from .core.constants import PUBKEY_LENGTH
from .errors import EncodingError

def to_pubkey(value: Pubkey | str | bytes, field: str = "pubkey") -> Pubkey:
    """
    Reduces a Pubkey, base58 string or raw bytes to a Pubkey.
    Anything that is not exactly 32 bytes raises EncodingError.
    """
    if isinstance(value, Pubkey):
        return value
    if isinstance(value, (bytes, bytearray)):
        if len(value) != PUBKEY_LENGTH:
            raise EncodingError(field, f"expected {PUBKEY_LENGTH} bytes, got {len(value)}")
        return Pubkey.from_bytes(bytes(value))
    if isinstance(value, str):
        try:
            return Pubkey.from_string(value)
        except ValueError as e:
            raise EncodingError(field, f"invalid base58 public key {value!r}") from e
    raise EncodingError(field, f"cannot convert {type(value).__name__} to a public key")
