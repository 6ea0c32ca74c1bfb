from edi384.decoders.decoder_base import SegmentDecoderBase
from edi384.models.segment_definition import SegmentDefinition
from edi384.models.segment_dictionary import ELEMENT_SEPARATOR
from edi384.types.exceptions import MalformedSegmentError


class FieldDecoder(SegmentDecoderBase):
    """
    Extracts the single fixed-width field of a segment.

    The window starts right after the segment key (and the element separator
    that follows it, when there is one) and spans `definition.size`
    characters. Values are returned as-is: no trimming, no type coercion.
    """

    def __init__(self, element_separator: str = ELEMENT_SEPARATOR):
        super().__init__()
        if not element_separator:
            raise ValueError("Element separator must not be empty")
        self.element_separator = element_separator

    def decode(self, segment: str, definition: SegmentDefinition) -> str:
        key = definition.key
        if not segment.startswith(key):
            raise MalformedSegmentError(key, segment, definition.size,
                                        reason=f"segment does not start with '{key}'")

        start = self._payload_start(segment, key)
        value = segment[start:start + definition.size]

        # Short segments are rejected, never padded
        if len(value) < definition.size:
            raise MalformedSegmentError(
                key, segment, definition.size,
                reason=f"expected {definition.size} characters after '{key}', got {len(value)}"
            )

        self.logger.debug("Decoded %s: %r", key, value)
        return value

    def _payload_start(self, segment: str, key: str) -> int:
        start = len(key)
        if segment.startswith(self.element_separator, start):
            start += len(self.element_separator)
        return start
