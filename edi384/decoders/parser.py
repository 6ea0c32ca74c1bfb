import logging
from typing import Callable, Dict, Iterable, Iterator, List

import pandas as pd

from edi384.decoders.field_decoder import FieldDecoder
from edi384.decoders.record_accumulator import RecordAccumulator
from edi384.decoders.record_assembler import RecordAssembler
from edi384.exporters.csv_exporter import CsvRowEmitter
from edi384.exporters.eligibility_exporter import EligibilityExporter
from edi384.models.segment_dictionary import (
    DEFINITION_384,
    ELEMENT_SEPARATOR,
    DefinitionLike,
    SegmentDictionary,
)
from edi384.types.exceptions import MissingCallbackError

RowCallback = Callable[[List[str]], None]


class Parser:
    """
    Parses a 384 eligibility segment stream into flat rows.

    Segments are grouped into records by the header segment (the first key
    of the definition), then each record is pivoted into one row whose
    columns follow `row_keys`.
    """

    def __init__(self, definition: DefinitionLike = DEFINITION_384, element_separator: str = ELEMENT_SEPARATOR):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.dictionary = SegmentDictionary.coerce(definition)
        self.element_separator = element_separator

        self.decoder = FieldDecoder(element_separator)
        self.accumulator = RecordAccumulator(self.dictionary, element_separator)
        self.assembler = RecordAssembler(self.dictionary, self.decoder, element_separator)

    @property
    def row_keys(self) -> List[str]:
        """Names of the output columns, repeated segments expanded."""
        return self.dictionary.column_keys

    def known_line_type(self, line: str) -> bool:
        """Checks if the line is a segment type we can process"""
        return self.dictionary.classify(line, self.element_separator) is not None

    def record_header(self, line: str) -> bool:
        """Checks if the line starts a new record"""
        return self.dictionary.classify(line, self.element_separator) == self.dictionary.header_key

    def iter_rows(self, segments: Iterable[str]) -> Iterator[List[str]]:
        """Lazily yield one row per record, in input order."""
        for record in self.accumulator.accumulate(segments):
            yield self.assembler.assemble(record)

    def parse(self, segments: Iterable[str], callback: RowCallback = None) -> int:
        """
        Call `callback(row)` once per record found in `segments`, including a
        trailing record at end of input. Returns the number of records.
        """
        if callback is None or not callable(callback):
            raise MissingCallbackError("parse() requires a per-record callback")

        count = 0
        for row in self.iter_rows(segments):
            callback(row)
            count += 1

        self.logger.debug("Parsed %d records", count)
        return count

    def parse_to_csv(self, segments: Iterable[str], emitter: CsvRowEmitter = None) -> Iterator[str]:
        """Yield the CSV header line, then one CSV line per record."""
        emitter = emitter or CsvRowEmitter()
        yield emitter.render(self.row_keys)
        for row in self.iter_rows(segments):
            yield emitter.render(row)

    def parse_and_zip(self, segments: Iterable[str]) -> List[Dict[str, str]]:
        """Parse into {column key: value} mappings. Used for testing."""
        records = []
        row_keys = self.row_keys
        self.parse(segments, lambda row: records.append(dict(zip(row_keys, row))))
        return records

    def parse_to_dataframe(self, segments: Iterable[str]) -> pd.DataFrame:
        """Parse the whole stream into a DataFrame. Useful for small files."""
        return EligibilityExporter.rows_to_dataframe(self.iter_rows(segments), self.row_keys)
