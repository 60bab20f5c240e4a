from .dto import Collection, Creator, Uses
from .enums import Field, FieldKind, InstructionType, UseMethod
from .errors import DecodingError, EncodingError, TokenMetadataError
from .field import FieldConfig, get_field_config
from .instructions import (
    create_emit_instruction,
    create_initialize_instruction,
    create_initialize_metadata_pointer_instruction,
    create_remove_key_instruction,
    create_update_authority_instruction,
    create_update_field_instruction,
    decode_emit_data,
    decode_initialize_data,
    decode_initialize_metadata_pointer_data,
    decode_instruction_data,
    decode_remove_key_data,
    decode_update_authority_data,
    decode_update_field_data,
)

__version__ = "0.1.0"
