class ID3ReaderError(Exception):
    """Base exception for tag reading errors."""


class InvalidAudioFileError(ID3ReaderError):
    """File is missing, not a regular file, unreadable, or empty."""

    def __init__(self, path: object, reason: str) -> None:
        super().__init__(f"Invalid audio file {path}: {reason}")
        self.path = path
        self.reason = reason
