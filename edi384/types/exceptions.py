from typing import Optional


class Edi384Error(Exception):
    """Base class for every error raised while parsing an eligibility file."""


class MissingCallbackError(Edi384Error, TypeError):
    """Raised when a parse is started without a per-record callback."""


class MalformedSegmentError(Edi384Error, ValueError):
    """Raised when a segment's text does not fit its declared field size."""

    def __init__(self, key: str, segment: str, size: int, reason: Optional[str] = None):
        self.key = key
        self.segment = segment
        self.size = size
        if reason is None:
            reason = f"expected {size} characters after '{key}'"
        super().__init__(f"Malformed {key} segment {segment!r}: {reason}")


class SegmentEncodingError(Edi384Error, ValueError):
    """Raised when the bytes of a segment cannot be decoded with the file encoding."""

    def __init__(self, file_path: str, offset: int, encoding: str, reason: str):
        self.file_path = file_path
        self.offset = offset
        self.encoding = encoding
        super().__init__(f"{file_path}: segment at byte {offset} is not valid {encoding}: {reason}")
