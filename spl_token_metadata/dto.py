from pydantic import BaseModel, ConfigDict, Field, field_validator

from solders.pubkey import Pubkey

from .enums import UseMethod
from .utils import to_pubkey

U64_MAX = 2 ** 64 - 1


class Creator(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    address: Pubkey
    verified: bool = False
    share: int = Field(ge=0, le=255)

    @field_validator("address", mode="before")
    @classmethod
    def coerce_address(cls, v):
        return to_pubkey(v, "creator.address")


class Collection(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    key: Pubkey
    verified: bool = False

    @field_validator("key", mode="before")
    @classmethod
    def coerce_key(cls, v):
        return to_pubkey(v, "collection.key")


class Uses(BaseModel):
    """
    Remaining uses are not checked against the total here,
    the program decides what an exhausted record means.
    """
    model_config = ConfigDict(frozen=True)

    use_method: UseMethod
    remaining: int = Field(ge=0, le=U64_MAX)
    total: int = Field(ge=0, le=U64_MAX)
