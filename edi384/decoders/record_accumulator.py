import logging
from typing import Iterable, Iterator, Optional

from edi384.models.record import Record
from edi384.models.segment_dictionary import ELEMENT_SEPARATOR, SegmentDictionary
from edi384.types.enums import AccumulatorState


class RecordAccumulator:
    """
    Groups a segment stream into records.

    A header segment closes the record in progress and opens a new one that
    starts with the header itself. Known segments seen before the first
    header and segments missing from the dictionary are dropped.
    """

    def __init__(self, dictionary: SegmentDictionary, element_separator: str = ELEMENT_SEPARATOR):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.dictionary = dictionary
        self.element_separator = element_separator

    def accumulate(self, segments: Iterable[str]) -> Iterator[Record]:
        """Yield one Record per header found; only one record is buffered at a time."""
        state = AccumulatorState.IDLE
        current: Optional[Record] = None
        record_count = 0

        for position, segment in enumerate(segments):
            if not segment:
                continue

            key = self.dictionary.classify(segment, self.element_separator)
            if key is None:
                continue

            if key == self.dictionary.header_key:
                if current is not None and current.segments:
                    yield current
                record_count += 1
                current = Record(index=record_count, start_position=position, segments=[segment])
                state = AccumulatorState.COLLECTING

            elif state is AccumulatorState.COLLECTING:
                current.segments.append(segment)

            else:
                self.logger.debug("Discarding %s segment at position %d: no record started", key, position)

        # Trailing record after end of input
        if current is not None and current.segments:
            yield current

        self.logger.debug("Accumulated %d records", record_count)
