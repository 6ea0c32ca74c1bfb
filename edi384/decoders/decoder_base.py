from abc import ABC, abstractmethod
import logging
from edi384.models.segment_definition import SegmentDefinition


class SegmentDecoderBase(ABC):
    def __init__(self) -> None:
        # Per-instance logger; subclasses must call super().__init__()
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @abstractmethod
    def decode(self, segment: str, definition: SegmentDefinition) -> str:
        pass
