import logging
from typing import Dict, List

from edi384.decoders.decoder_base import SegmentDecoderBase
from edi384.models.record import Record
from edi384.models.segment_dictionary import ELEMENT_SEPARATOR, SegmentDictionary


class RecordAssembler:
    """Decodes the segments of one record and pivots them into a single row."""

    def __init__(self, dictionary: SegmentDictionary, decoder: SegmentDecoderBase,
                 element_separator: str = ELEMENT_SEPARATOR):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.dictionary = dictionary
        self.decoder = decoder
        self.element_separator = element_separator

    def assemble(self, record: Record) -> List[str]:
        """
        Build the output row for a record.

        Column positions come from the dictionary alone, so every row has the
        same length. Each occurrence of a key fills that key's next free slot;
        occurrences beyond the declared `occurs` are dropped (first N win).
        """
        row = [""] * self.dictionary.column_count
        occurrences: Dict[str, int] = {}

        for segment in record.segments:
            key = self.dictionary.classify(segment, self.element_separator)
            if key is None:
                continue

            definition = self.dictionary[key]
            count = occurrences.get(key, 0)
            if count >= definition.occurs:
                self.logger.debug("Record %d: dropping %s occurrence %d (max %d)",
                                  record.index, key, count + 1, definition.occurs)
                continue

            row[self.dictionary.slot_offset(key) + count] = self.decoder.decode(segment, definition)
            occurrences[key] = count + 1

        return row
