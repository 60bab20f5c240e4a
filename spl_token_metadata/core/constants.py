from typing import Final

from solders.pubkey import Pubkey
from solders.system_program import ID as SYS_PROGRAM_ID
from spl.token.constants import TOKEN_2022_PROGRAM_ID

from .config import settings

TOKEN_METADATA_PROGRAM_ID = Pubkey.from_string(settings.program_id)

# Sentinel written in place of a cleared update authority.
NONE_AUTHORITY = SYS_PROGRAM_ID

PUBKEY_LENGTH = 32
DISCRIMINATOR_LENGTH = 8
MAX_STRING_LENGTH = 2 ** 32 - 1

# splDiscriminate("spl_token_metadata_interface:<name>")
INITIALIZE_DISCRIMINATOR: Final[bytes] = bytes([210, 225, 30, 162, 88, 184, 77, 141])
UPDATE_FIELD_DISCRIMINATOR: Final[bytes] = bytes([221, 233, 49, 45, 181, 202, 220, 200])
REMOVE_KEY_DISCRIMINATOR: Final[bytes] = bytes([234, 18, 32, 56, 89, 141, 37, 181])
UPDATE_AUTHORITY_DISCRIMINATOR: Final[bytes] = bytes([215, 228, 166, 228, 84, 100, 86, 123])
EMIT_DISCRIMINATOR: Final[bytes] = bytes([250, 166, 180, 250, 13, 12, 184, 70])

METADATA_POINTER_PROGRAM_ID = TOKEN_2022_PROGRAM_ID
METADATA_POINTER_DISCRIMINATOR = 39
METADATA_POINTER_INITIALIZE_DISCRIMINATOR = 0
