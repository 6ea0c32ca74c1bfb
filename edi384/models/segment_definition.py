from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class SegmentDefinition:
    """Declared layout of one segment type: field size and max repetitions per record."""
    key: str
    size: int
    occurs: int = 1

    def __post_init__(self):
        if not self.key:
            raise ValueError("Segment key must not be empty")
        if self.size < 0:
            raise ValueError(f"Segment {self.key}: size must be >= 0, got {self.size}")
        if self.occurs < 1:
            raise ValueError(f"Segment {self.key}: occurs must be >= 1, got {self.occurs}")

    def column_keys(self) -> List[str]:
        """Output column names for this segment, one per allowed occurrence."""
        if self.occurs == 1:
            return [self.key]
        return [f"{self.key}_{n}" for n in range(1, self.occurs + 1)]
