from enum import Enum, IntEnum

class Field(str, Enum):
    NAME = "name"
    SYMBOL = "symbol"
    URI = "uri"

class FieldKind(IntEnum):
    NAME = 0
    SYMBOL = 1
    URI = 2
    KEY = 3

class UseMethod(IntEnum):
    BURN = 0
    SINGLE = 1
    MULTIPLE = 2

class InstructionType(str, Enum):
    initialize = "initialize"
    update_field = "update_field"
    remove_key = "remove_key"
    update_authority = "update_authority"
    emit = "emit"
    initialize_metadata_pointer = "initialize_metadata_pointer"
