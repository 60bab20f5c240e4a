from construct import Construct, ConstructError
from solders.instruction import AccountMeta, Instruction
from solders.pubkey import Pubkey

from ..core.logger import logger
from ..enums import InstructionType
from ..errors import DecodingError, EncodingError
from ..layouts.primitives import field_from_path


def encode_data(instruction: InstructionType, layout: Construct, values: dict) -> bytes:
    """
    Builds the payload for one instruction. Construct failures are reported
    as EncodingError naming the field they happened in.
    """
    try:
        return layout.build(values)
    except EncodingError as e:
        logger.error(f"[TokenMetadata] cannot encode {instruction.value}", field=e.field, error=e.message)
        raise
    except ConstructError as e:
        field = field_from_path(getattr(e, "path", None), default=instruction.value)
        logger.error(f"[TokenMetadata] cannot encode {instruction.value}", field=field, error=str(e))
        raise EncodingError(field, str(e)) from e


def decode_data(instruction: InstructionType, layout: Construct, data: bytes):
    try:
        return layout.parse(data)
    except (ConstructError, UnicodeDecodeError) as e:
        raise DecodingError(f"malformed {instruction.value} data: {e}") from e


def make_instruction(
    instruction: InstructionType,
    program_id: Pubkey,
    accounts: list[AccountMeta],
    data: bytes,
) -> Instruction:
    logger.debug(
        f"[TokenMetadata] built {instruction.value} instruction",
        program_id=str(program_id),
        accounts=len(accounts),
        data_len=len(data),
    )
    return Instruction(
        program_id=program_id,
        accounts=accounts,
        data=data,
    )
