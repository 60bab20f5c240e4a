from typing import Optional

from construct import Container
from solders.instruction import AccountMeta, Instruction
from solders.pubkey import Pubkey

from ..core.constants import (
    DISCRIMINATOR_LENGTH,
    EMIT_DISCRIMINATOR,
    INITIALIZE_DISCRIMINATOR,
    NONE_AUTHORITY,
    REMOVE_KEY_DISCRIMINATOR,
    TOKEN_METADATA_PROGRAM_ID,
    UPDATE_AUTHORITY_DISCRIMINATOR,
    UPDATE_FIELD_DISCRIMINATOR,
)
from ..dto import Collection, Creator, Uses
from ..enums import Field, InstructionType
from ..errors import DecodingError
from ..field import FieldConfig
from ..layouts import (
    EmitLayout,
    InitializeLayout,
    RemoveKeyLayout,
    UpdateAuthorityLayout,
    UpdateFieldLayout,
)
from .common import decode_data, encode_data, make_instruction

LAYOUTS = {
    INITIALIZE_DISCRIMINATOR: (InstructionType.initialize, InitializeLayout),
    UPDATE_FIELD_DISCRIMINATOR: (InstructionType.update_field, UpdateFieldLayout),
    REMOVE_KEY_DISCRIMINATOR: (InstructionType.remove_key, RemoveKeyLayout),
    UPDATE_AUTHORITY_DISCRIMINATOR: (InstructionType.update_authority, UpdateAuthorityLayout),
    EMIT_DISCRIMINATOR: (InstructionType.emit, EmitLayout),
}


def create_initialize_instruction(
    *,
    metadata: Pubkey,
    update_authority: Pubkey,
    mint: Pubkey,
    mint_authority: Pubkey,
    name: str,
    symbol: str,
    uri: str,
    seller_fee_basis_points: int = 0,
    creators: Optional[list[Creator | dict]] = None,
    collection: Optional[Collection | dict] = None,
    uses: Optional[Uses | dict] = None,
    program_id: Pubkey = TOKEN_METADATA_PROGRAM_ID,
) -> Instruction:
    """
    Initializes a TLV entry with the basic token-metadata fields.

    Assumes that the provided mint is an SPL token mint, that the metadata
    account is allocated and assigned to the program, and that the metadata
    account has enough lamports to cover the rent-exempt reserve.

    Verified creators and a verified collection must co-sign, so they are
    appended as read-only signers in the order given.
    """
    creators = [Creator.model_validate(creator) for creator in creators or []]
    if collection is not None:
        collection = Collection.model_validate(collection)
    if uses is not None:
        uses = Uses.model_validate(uses)

    accounts = [
        AccountMeta(pubkey=metadata, is_signer=False, is_writable=True),
        AccountMeta(pubkey=update_authority, is_signer=False, is_writable=False),
        AccountMeta(pubkey=mint, is_signer=False, is_writable=False),
        AccountMeta(pubkey=mint_authority, is_signer=True, is_writable=False),
    ]
    for creator in creators:
        if creator.verified:
            accounts.append(AccountMeta(pubkey=creator.address, is_signer=True, is_writable=False))
    if collection is not None and collection.verified:
        accounts.append(AccountMeta(pubkey=collection.key, is_signer=True, is_writable=False))

    data = encode_data(InstructionType.initialize, InitializeLayout, {
        "name": name,
        "symbol": symbol,
        "uri": uri,
        "seller_fee_basis_points": seller_fee_basis_points,
        # an empty list goes out as None, never as a zero-length vec
        "creators": creators or None,
        "collection": collection,
        "uses": uses,
    })
    return make_instruction(InstructionType.initialize, program_id, accounts, data)


def create_update_field_instruction(
    *,
    metadata: Pubkey,
    update_authority: Pubkey,
    field: Field | FieldConfig | str,
    value: str,
    program_id: Pubkey = TOKEN_METADATA_PROGRAM_ID,
) -> Instruction:
    """
    If the field does not exist on the account, it will be created.
    If the field does exist, it will be overwritten.
    """
    accounts = [
        AccountMeta(pubkey=metadata, is_signer=False, is_writable=True),
        AccountMeta(pubkey=update_authority, is_signer=True, is_writable=False),
    ]
    data = encode_data(InstructionType.update_field, UpdateFieldLayout, {
        "field": field,
        "value": value,
    })
    return make_instruction(InstructionType.update_field, program_id, accounts, data)


def create_remove_key_instruction(
    *,
    metadata: Pubkey,
    update_authority: Pubkey,
    key: str,
    idempotent: bool,
    program_id: Pubkey = TOKEN_METADATA_PROGRAM_ID,
) -> Instruction:
    accounts = [
        AccountMeta(pubkey=metadata, is_signer=False, is_writable=True),
        AccountMeta(pubkey=update_authority, is_signer=True, is_writable=False),
    ]
    data = encode_data(InstructionType.remove_key, RemoveKeyLayout, {
        "idempotent": idempotent,
        "key": key,
    })
    return make_instruction(InstructionType.remove_key, program_id, accounts, data)


def create_update_authority_instruction(
    *,
    metadata: Pubkey,
    old_authority: Pubkey,
    new_authority: Optional[Pubkey],
    program_id: Pubkey = TOKEN_METADATA_PROGRAM_ID,
) -> Instruction:
    """
    Passing None clears the authority. The field has no presence byte,
    so the system program id is written in its place.
    """
    accounts = [
        AccountMeta(pubkey=metadata, is_signer=False, is_writable=True),
        AccountMeta(pubkey=old_authority, is_signer=True, is_writable=False),
    ]
    data = encode_data(InstructionType.update_authority, UpdateAuthorityLayout, {
        "new_authority": new_authority if new_authority is not None else NONE_AUTHORITY,
    })
    return make_instruction(InstructionType.update_authority, program_id, accounts, data)


def create_emit_instruction(
    *,
    metadata: Pubkey,
    start: Optional[int] = None,
    end: Optional[int] = None,
    program_id: Pubkey = TOKEN_METADATA_PROGRAM_ID,
) -> Instruction:
    accounts = [
        AccountMeta(pubkey=metadata, is_signer=False, is_writable=False),
    ]
    data = encode_data(InstructionType.emit, EmitLayout, {
        "start": start,
        "end": end,
    })
    return make_instruction(InstructionType.emit, program_id, accounts, data)


def decode_instruction_data(data: bytes) -> tuple[InstructionType, Container]:
    discriminator = bytes(data[:DISCRIMINATOR_LENGTH])
    if discriminator not in LAYOUTS:
        raise DecodingError(f"unknown instruction discriminator {discriminator.hex()}")
    instruction, layout = LAYOUTS[discriminator]
    return instruction, decode_data(instruction, layout, bytes(data))


def decode_initialize_data(data: bytes) -> Container:
    return decode_data(InstructionType.initialize, InitializeLayout, data)


def decode_update_field_data(data: bytes) -> Container:
    return decode_data(InstructionType.update_field, UpdateFieldLayout, data)


def decode_remove_key_data(data: bytes) -> Container:
    return decode_data(InstructionType.remove_key, RemoveKeyLayout, data)


def decode_update_authority_data(data: bytes) -> Container:
    """The sentinel key is returned as is, not mapped back to None."""
    return decode_data(InstructionType.update_authority, UpdateAuthorityLayout, data)


def decode_emit_data(data: bytes) -> Container:
    return decode_data(InstructionType.emit, EmitLayout, data)
