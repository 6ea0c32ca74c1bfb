from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Union

from edi384.models.segment_definition import SegmentDefinition
from edi384.types.enums import SegmentKey

ELEMENT_SEPARATOR = "*"

# Layout of the 384 eligibility file. The first key is the record header.
DEFINITION_384 = {
    SegmentKey.MEMBER_LEVEL_DETAIL.value: {"size": 17},
    SegmentKey.REFERENCE_IDENTIFICATION.value: {"occurs": 5, "size": 2},
    SegmentKey.DATE_TIME_PERIOD.value: {"occurs": 3, "size": 3},
    SegmentKey.INDIVIDUAL_NAME.value: {"occurs": 2, "size": 9},
    SegmentKey.CONTACT_INFORMATION.value: {"size": 8},
    SegmentKey.ADDRESS.value: {"size": 2},
    SegmentKey.GEOGRAPHIC_LOCATION.value: {"size": 3},
    SegmentKey.DEMOGRAPHICS.value: {"size": 3},
    SegmentKey.HEALTH_INFORMATION.value: {"size": 3},
    SegmentKey.HEALTH_COVERAGE.value: {"size": 5},
    SegmentKey.MONETARY_AMOUNT.value: {"size": 2},
}

DefinitionLike = Union["SegmentDictionary", Mapping[str, Union[Mapping[str, int], SegmentDefinition]]]


class SegmentDictionary(Mapping):
    """
    Immutable, ordered mapping of segment key -> SegmentDefinition.

    Declaration order matters twice: the first key marks the start of a
    record, and the keys (expanded by their occurs count) give the output
    column order. Both are computed once here.
    """

    def __init__(self, definitions: Iterable[SegmentDefinition]):
        entries: Dict[str, SegmentDefinition] = {}
        for definition in definitions:
            if definition.key in entries:
                raise ValueError(f"Duplicate segment key: {definition.key}")
            entries[definition.key] = definition

        if not entries:
            raise ValueError("Segment dictionary must declare at least one segment")

        self._definitions = MappingProxyType(entries)
        self._header_key = next(iter(entries))

        column_keys: List[str] = []
        slot_offsets: Dict[str, int] = {}
        for key, definition in entries.items():
            slot_offsets[key] = len(column_keys)
            column_keys.extend(definition.column_keys())
        self._column_keys = tuple(column_keys)
        self._slot_offsets = MappingProxyType(slot_offsets)

        # Longest first, so 'NM1' wins over a shorter key sharing its prefix
        self._keys_by_length = sorted(entries, key=len, reverse=True)

    @classmethod
    def from_mapping(cls, mapping: Mapping) -> "SegmentDictionary":
        """
        Build from {key: {"size": n, "occurs": m}} (occurs defaults to 1).
        Values may also be SegmentDefinition instances.
        """
        definitions = []
        for key, entry in mapping.items():
            key = key.value if isinstance(key, SegmentKey) else str(key)
            if isinstance(entry, SegmentDefinition):
                if entry.key != key:
                    raise ValueError(f"Definition key {entry.key} registered under {key}")
                definitions.append(entry)
                continue
            if "size" not in entry:
                raise ValueError(f"Segment {key}: missing 'size'")
            definitions.append(SegmentDefinition(key=key, size=int(entry["size"]),
                                                 occurs=int(entry.get("occurs", 1))))
        return cls(definitions)

    @classmethod
    def coerce(cls, definition: DefinitionLike) -> "SegmentDictionary":
        if isinstance(definition, SegmentDictionary):
            return definition
        return cls.from_mapping(definition)

    def __getitem__(self, key: str) -> SegmentDefinition:
        return self._definitions[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def __repr__(self) -> str:
        return f"SegmentDictionary({list(self._definitions.values())!r})"

    @property
    def header_key(self) -> str:
        return self._header_key

    @property
    def column_keys(self) -> List[str]:
        return list(self._column_keys)

    @property
    def column_count(self) -> int:
        return len(self._column_keys)

    def slot_offset(self, key: str) -> int:
        """Index of the first output column reserved for `key`."""
        return self._slot_offsets[key]

    def classify(self, segment: str, element_separator: str = ELEMENT_SEPARATOR) -> Optional[str]:
        """
        Return the dictionary key of a raw segment, or None if it is unknown.

        The key is the token before the first element separator. Segments
        without any separator (fixed-width only) are matched on the longest
        declared key they start with.

        The prefix fallback accepts any separator-less text: 'HDRX' is an
        HDR segment and 'DMGXYZ' a DMG segment. Callers reading delimited
        files must pass the file's real element separator, otherwise
        segments are matched by prefix instead of by token.
        """
        if not segment:
            return None

        token, found, _ = segment.partition(element_separator)
        if token in self._definitions:
            return token
        if found:
            return None

        for key in self._keys_by_length:
            if segment.startswith(key):
                return key
        return None
