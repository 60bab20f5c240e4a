from construct import (
    Adapter,
    Bytes,
    Flag,
    GreedyBytes,
    Int8ul,
    Int32ul,
    Prefixed,
    PrefixedArray,
    SizeofError,
    Subconstruct,
)
from pydantic import BaseModel, ValidationError
from solders.pubkey import Pubkey

from ..core.constants import MAX_STRING_LENGTH, PUBKEY_LENGTH
from ..errors import DecodingError, EncodingError
from ..utils import to_pubkey

PUBKEY_LAYOUT = Bytes(PUBKEY_LENGTH)


def field_from_path(path: str | None, default: str = "value") -> str:
    """Last component of a construct path, e.g. "(building) -> name" -> "name"."""
    if not path:
        return default
    name = path.rsplit(" -> ", 1)[-1].strip()
    if not name or name.startswith("("):
        return default
    return name


class PublicKey(Adapter):
    """32 raw bytes, no length prefix."""

    def __init__(self):
        super().__init__(PUBKEY_LAYOUT)

    def _decode(self, obj, context, path):
        return Pubkey.from_bytes(obj)

    def _encode(self, obj, context, path):
        return bytes(to_pubkey(obj, field_from_path(path)))


class ZeroablePublicKey(Adapter):
    """32 bytes where the all-zero key stands for None."""

    def __init__(self):
        super().__init__(PUBKEY_LAYOUT)

    def _decode(self, obj, context, path):
        if obj == bytes(PUBKEY_LENGTH):
            return None
        return Pubkey.from_bytes(obj)

    def _encode(self, obj, context, path):
        if obj is None:
            return bytes(PUBKEY_LENGTH)
        return bytes(to_pubkey(obj, field_from_path(path)))


class String(Adapter):
    """UTF-8 bytes behind a u32 little-endian length."""

    def __init__(self):
        super().__init__(Prefixed(Int32ul, GreedyBytes))

    def _decode(self, obj, context, path):
        return obj.decode("utf-8")

    def _encode(self, obj, context, path):
        if not isinstance(obj, str):
            raise EncodingError(field_from_path(path), f"expected str, got {type(obj).__name__}")
        encoded = obj.encode("utf-8")
        if len(encoded) > MAX_STRING_LENGTH:
            raise EncodingError(
                field_from_path(path),
                f"utf-8 length {len(encoded)} does not fit a u32 length prefix",
            )
        return encoded


class Option(Subconstruct):
    """
    One presence byte, then the value when the byte is 1.
    Builds None as a single zero byte.
    """

    def __init__(self, subcon):
        super().__init__(subcon)
        self.flagbuildnone = True

    def _parse(self, stream, context, path):
        present = Int8ul._parsereport(stream, context, path)
        if present > 1:
            raise DecodingError(f"invalid option flag {present} at {path}")
        if not present:
            return None
        return self.subcon._parsereport(stream, context, path)

    def _build(self, obj, stream, context, path):
        if obj is None:
            Flag._build(False, stream, context, path)
            return None
        Flag._build(True, stream, context, path)
        return self.subcon._build(obj, stream, context, path)

    def _sizeof(self, context, path):
        raise SizeofError("Option has no fixed size", path=path)


def Vec(subcon):
    return PrefixedArray(Int32ul, subcon)


class Record(Adapter):
    """Maps a pydantic model onto a construct Struct with the same field names."""

    def __init__(self, model: type[BaseModel], subcon):
        super().__init__(subcon)
        self.model = model

    def _decode(self, obj, context, path):
        try:
            return self.model(**{name: obj[name] for name in self.model.model_fields})
        except ValidationError as e:
            raise DecodingError(f"invalid {self.model.__name__} at {path}: {e}") from e

    def _encode(self, obj, context, path):
        if isinstance(obj, BaseModel):
            return obj.model_dump()
        return obj
