from dataclasses import dataclass, field
from typing import List


@dataclass
class Record:
    """Segments of one logical record, from its header up to the next header."""
    index: int  # Record number in the stream (1-based)
    start_position: int  # Position of the header segment in the input stream
    segments: List[str] = field(default_factory=list)

    @property
    def header(self) -> str:
        return self.segments[0] if self.segments else ""
