from construct import Adapter, Int8ul, Pass, Struct, Switch, this

from ..enums import FieldKind
from ..errors import DecodingError
from ..field import FieldConfig, get_field_config
from .primitives import String


class FieldAdapter(Adapter):
    """Data enum: u8 variant index, then the KEY variant's string."""

    def __init__(self):
        super().__init__(Struct(
            "kind" / Int8ul,
            "key" / Switch(this.kind, {int(FieldKind.KEY): String()}, default=Pass),
        ))

    def _decode(self, obj, context, path):
        try:
            kind = FieldKind(obj.kind)
        except ValueError as e:
            raise DecodingError(f"unknown field variant {obj.kind}") from e
        return FieldConfig(kind, obj.key)

    def _encode(self, obj, context, path):
        config = get_field_config(obj)
        return {"kind": int(config.kind), "key": config.key}


FIELD_LAYOUT = FieldAdapter()
