import mmap
import os
from typing import Iterable, Iterator

from edi384.types.exceptions import SegmentEncodingError

SEGMENT_SEPARATOR = "~"
LINE_BREAKS = "\r\n"


class SegmentFileReader:
    def __init__(self, file_path: str, separator: str = SEGMENT_SEPARATOR, encoding: str = "utf-8"):
        if not separator:
            raise ValueError("Segment separator must not be empty")
        self.file_path = file_path
        self.separator = separator
        self.encoding = encoding

    def read_segments(self) -> Iterator[str]:
        """Lazily read segments using memory mapping, trailing separator stripped."""
        # mmap refuses zero-length files
        if os.path.getsize(self.file_path) == 0:
            return

        separator = self.separator.encode(self.encoding)
        with open(self.file_path, 'rb') as file:
            with mmap.mmap(file.fileno(), 0, access=mmap.ACCESS_READ) as mmapped_file:
                position = 0
                file_size = len(mmapped_file)

                while position < file_size:
                    end = mmapped_file.find(separator, position)
                    if end == -1:
                        # Trailing segment without a separator
                        end = file_size

                    raw = mmapped_file[position:end]
                    try:
                        segment = raw.decode(self.encoding)
                    except UnicodeDecodeError as e:
                        raise SegmentEncodingError(self.file_path, position + e.start,
                                                   self.encoding, e.reason) from e
                    position = end + len(separator)

                    segment = segment.strip(LINE_BREAKS)
                    if segment:
                        yield segment


def lazy_file_stream(file_path: str, separator: str = SEGMENT_SEPARATOR) -> Iterator[str]:
    """Open a file, split it on the separator and return a lazy segment stream."""
    return SegmentFileReader(file_path, separator).read_segments()


def lazy_line_filter(lines: Iterable[str], separator: str = SEGMENT_SEPARATOR) -> Iterator[str]:
    """
    Lazily remove the trailing separator (and line breaks) from segments
    that were split by something else, e.g. a file iterated with newline=sep.
    """
    for line in lines:
        if line is None:
            continue
        segment = line.strip(LINE_BREAKS)
        if segment.endswith(separator):
            segment = segment[:-len(separator)]
        yield segment


def split_segments(text: str, separator: str = SEGMENT_SEPARATOR) -> Iterator[str]:
    """Lazily split an in-memory document into segments."""
    if not separator:
        raise ValueError("Segment separator must not be empty")

    position = 0
    while position < len(text):
        end = text.find(separator, position)
        if end == -1:
            end = len(text)
        segment = text[position:end].strip(LINE_BREAKS)
        position = end + len(separator)
        if segment:
            yield segment
