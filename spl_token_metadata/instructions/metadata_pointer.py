from typing import Optional

from construct import Container
from solders.instruction import AccountMeta, Instruction
from solders.pubkey import Pubkey

from ..core.constants import METADATA_POINTER_PROGRAM_ID
from ..enums import InstructionType
from ..layouts import InitializeMetadataPointerLayout
from .common import decode_data, encode_data, make_instruction


def create_initialize_metadata_pointer_instruction(
    mint: Pubkey,
    authority: Optional[Pubkey],
    metadata_address: Optional[Pubkey],
    program_id: Pubkey = METADATA_POINTER_PROGRAM_ID,
) -> Instruction:
    """
    Points a Token-2022 mint at the account holding its metadata.
    Must run before the mint is initialized. None is written as the zero key.
    """
    data = encode_data(InstructionType.initialize_metadata_pointer, InitializeMetadataPointerLayout, {
        "authority": authority,
        "metadata_address": metadata_address,
    })

    return make_instruction(
        InstructionType.initialize_metadata_pointer,
        program_id,
        [AccountMeta(pubkey=mint, is_signer=False, is_writable=True)],
        data,
    )


def decode_initialize_metadata_pointer_data(data: bytes) -> Container:
    return decode_data(InstructionType.initialize_metadata_pointer, InitializeMetadataPointerLayout, data)
