class TokenMetadataError(Exception):
    """Base class for every error raised by this package."""


class EncodingError(TokenMetadataError, ValueError):
    """An argument could not be written in the instruction wire format."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class DecodingError(TokenMetadataError, ValueError):
    """A payload does not match any known instruction layout."""
