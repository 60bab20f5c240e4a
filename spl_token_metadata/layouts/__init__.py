from .primitives import Option, PublicKey, Record, String, Vec, ZeroablePublicKey
from .field import FIELD_LAYOUT, FieldAdapter
from .token_metadata import (
    CollectionLayout,
    CreatorLayout,
    EmitLayout,
    InitializeLayout,
    InitializeMetadataPointerLayout,
    RemoveKeyLayout,
    UpdateAuthorityLayout,
    UpdateFieldLayout,
    UsesLayout,
)
