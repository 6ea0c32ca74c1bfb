import csv
import io
import logging
import os
from typing import Any, Iterable, Sequence

logger = logging.getLogger(__name__)

PARTIAL_SUFFIX = ".part"


class CsvRowEmitter:
    """Renders ordered rows as CSV text lines (minimal quoting, doubled quotes)."""

    def __init__(self, delimiter: str = ",", quotechar: str = '"', lineterminator: str = "\n"):
        self.delimiter = delimiter
        self.quotechar = quotechar
        self.lineterminator = lineterminator

    def render(self, values: Sequence[Any]) -> str:
        """Render one row as a line, terminator included."""
        buffer = io.StringIO()
        writer = csv.writer(
            buffer,
            delimiter=self.delimiter,
            quotechar=self.quotechar,
            quoting=csv.QUOTE_MINIMAL,
            lineterminator=self.lineterminator,
        )
        writer.writerow(values)
        return buffer.getvalue()

    def export_to_csv(self, parser, segments: Iterable[str], output_path: str) -> int:
        """
        Stream a segment sequence through `parser` into a CSV file.
        Returns the number of data rows written.

        Rows go to `<output_path>.part` first, which replaces `output_path`
        only once the whole stream parsed; on any error it is removed and
        `output_path` is left untouched.
        """
        partial_path = f"{output_path}{PARTIAL_SUFFIX}"
        rows_written = 0
        try:
            with open(partial_path, "w", encoding="utf-8", newline="") as output:
                output.write(self.render(parser.row_keys))
                for row in parser.iter_rows(segments):
                    output.write(self.render(row))
                    rows_written += 1
            os.replace(partial_path, output_path)
        except BaseException:
            if os.path.exists(partial_path):
                os.remove(partial_path)
            raise

        logger.info("Exported %d records to %s", rows_written, output_path)
        return rows_written
