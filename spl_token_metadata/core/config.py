import os

from pydantic import BaseModel, Field


class Settings(BaseModel):
    program_id: str = Field(default=os.getenv("TOKEN_METADATA_PROGRAM_ID", "TokenzQdBNbLqP5VEhdkAS6EPFLC1PHnBqCXEpPxuEb"))
    log_level: str = Field(default=os.getenv("LOG_LEVEL", "INFO"))

settings = Settings()
