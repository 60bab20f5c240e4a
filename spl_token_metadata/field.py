from dataclasses import dataclass
from typing import Optional

from .enums import Field, FieldKind
from .errors import EncodingError

_WELL_KNOWN = {
    Field.NAME: FieldKind.NAME,
    "Name": FieldKind.NAME,
    Field.SYMBOL: FieldKind.SYMBOL,
    "Symbol": FieldKind.SYMBOL,
    Field.URI: FieldKind.URI,
    "Uri": FieldKind.URI,
}


@dataclass(frozen=True)
class FieldConfig:
    """
    One variant of the metadata field union.

    NAME, SYMBOL and URI carry no payload; KEY carries the
    custom key as a u32-prefixed string.
    """
    kind: FieldKind
    key: Optional[str] = None

    def __post_init__(self):
        if self.kind == FieldKind.KEY and self.key is None:
            raise EncodingError("field", "a KEY field needs a key")
        if self.kind != FieldKind.KEY and self.key is not None:
            raise EncodingError("field", f"{self.kind.name} field takes no key")


def get_field_config(field: "Field | FieldConfig | str") -> FieldConfig:
    """
    "name"/"Name", "symbol"/"Symbol" and "uri"/"Uri" select the well-known
    variants, any other string becomes a custom KEY field.
    """
    if isinstance(field, FieldConfig):
        return field
    if not isinstance(field, str):
        raise EncodingError("field", f"expected Field or str, got {type(field).__name__}")
    kind = _WELL_KNOWN.get(field)
    if kind is not None:
        return FieldConfig(kind)
    return FieldConfig(FieldKind.KEY, field)
