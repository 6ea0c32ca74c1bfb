from typing import Iterator, List

from edi384.decoders.parser import Parser, RowCallback
from edi384.decoders.segment_reader import SEGMENT_SEPARATOR, SegmentFileReader
from edi384.exporters.csv_exporter import CsvRowEmitter
from edi384.models.segment_dictionary import DEFINITION_384, ELEMENT_SEPARATOR, DefinitionLike


def parse_file(file_path: str, callback: RowCallback, definition: DefinitionLike = DEFINITION_384,
               separator: str = SEGMENT_SEPARATOR, element_separator: str = ELEMENT_SEPARATOR) -> int:
    """Parse an eligibility file, calling `callback(row)` per record. Returns the record count."""
    parser = Parser(definition, element_separator)
    reader = SegmentFileReader(file_path, separator)
    return parser.parse(reader.read_segments(), callback)


def iter_file_rows(file_path: str, definition: DefinitionLike = DEFINITION_384,
                   separator: str = SEGMENT_SEPARATOR,
                   element_separator: str = ELEMENT_SEPARATOR) -> Iterator[List[str]]:
    """
    Yield the rows of an eligibility file one by one.
    This avoids materializing the entire file before exporting.
    """
    parser = Parser(definition, element_separator)
    reader = SegmentFileReader(file_path, separator)
    yield from parser.iter_rows(reader.read_segments())


def convert_file_to_csv(input_path: str, output_path: str, definition: DefinitionLike = DEFINITION_384,
                        separator: str = SEGMENT_SEPARATOR, element_separator: str = ELEMENT_SEPARATOR) -> int:
    """Convert an eligibility file to CSV (header line first). Returns the number of records."""
    parser = Parser(definition, element_separator)
    reader = SegmentFileReader(input_path, separator)
    return CsvRowEmitter().export_to_csv(parser, reader.read_segments(), output_path)
