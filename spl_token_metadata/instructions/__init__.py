from .metadata_pointer import (
    create_initialize_metadata_pointer_instruction,
    decode_initialize_metadata_pointer_data,
)
from .token_metadata import (
    create_emit_instruction,
    create_initialize_instruction,
    create_remove_key_instruction,
    create_update_authority_instruction,
    create_update_field_instruction,
    decode_emit_data,
    decode_initialize_data,
    decode_instruction_data,
    decode_remove_key_data,
    decode_update_authority_data,
    decode_update_field_data,
)
