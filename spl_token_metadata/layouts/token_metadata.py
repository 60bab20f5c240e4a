from construct import Const, Flag, Int8ul, Int16ul, Int64ul, Struct

from ..core.constants import (
    EMIT_DISCRIMINATOR,
    INITIALIZE_DISCRIMINATOR,
    METADATA_POINTER_DISCRIMINATOR,
    METADATA_POINTER_INITIALIZE_DISCRIMINATOR,
    REMOVE_KEY_DISCRIMINATOR,
    UPDATE_AUTHORITY_DISCRIMINATOR,
    UPDATE_FIELD_DISCRIMINATOR,
)
from ..dto import Collection, Creator, Uses
from .field import FIELD_LAYOUT
from .primitives import Option, PublicKey, Record, String, Vec, ZeroablePublicKey

CreatorLayout = Record(Creator, Struct(
    "address" / PublicKey(),
    "verified" / Flag,
    "share" / Int8ul,
))

CollectionLayout = Record(Collection, Struct(
    "key" / PublicKey(),
    "verified" / Flag,
))

UsesLayout = Record(Uses, Struct(
    "use_method" / Int8ul,
    "remaining" / Int64ul,
    "total" / Int64ul,
))

# Field order is the wire order expected by the program.
InitializeLayout = Struct(
    "discriminator" / Const(INITIALIZE_DISCRIMINATOR),
    "name" / String(),
    "symbol" / String(),
    "uri" / String(),
    "seller_fee_basis_points" / Int16ul,
    "creators" / Option(Vec(CreatorLayout)),
    "collection" / Option(CollectionLayout),
    "uses" / Option(UsesLayout),
)

UpdateFieldLayout = Struct(
    "discriminator" / Const(UPDATE_FIELD_DISCRIMINATOR),
    "field" / FIELD_LAYOUT,
    "value" / String(),
)

RemoveKeyLayout = Struct(
    "discriminator" / Const(REMOVE_KEY_DISCRIMINATOR),
    "idempotent" / Flag,
    "key" / String(),
)

UpdateAuthorityLayout = Struct(
    "discriminator" / Const(UPDATE_AUTHORITY_DISCRIMINATOR),
    "new_authority" / PublicKey(),
)

EmitLayout = Struct(
    "discriminator" / Const(EMIT_DISCRIMINATOR),
    "start" / Option(Int64ul),
    "end" / Option(Int64ul),
)

InitializeMetadataPointerLayout = Struct(
    "instruction" / Const(bytes([METADATA_POINTER_DISCRIMINATOR])),
    "pointer_instruction" / Const(bytes([METADATA_POINTER_INITIALIZE_DISCRIMINATOR])),
    "authority" / ZeroablePublicKey(),
    "metadata_address" / ZeroablePublicKey(),
)
