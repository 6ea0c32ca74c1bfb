import pytest
from edi384.models.segment_definition import SegmentDefinition
from edi384.models.segment_dictionary import DEFINITION_384, SegmentDictionary
from edi384.types.enums import SegmentKey


class TestSegmentDictionary:
    @pytest.fixture
    def dictionary(self):
        return SegmentDictionary.from_mapping({
            "HDR": {"size": 3},
            "LN": {"occurs": 2, "size": 2},
            "NM1": {"size": 4},
            "N": {"size": 1},
        })

    def test_header_is_first_declared_key(self, dictionary):
        assert dictionary.header_key == "HDR"

    def test_column_keys_expand_occurs(self, dictionary):
        """Keys with occurs > 1 get one numbered column per occurrence"""
        assert dictionary.column_keys == ["HDR", "LN_1", "LN_2", "NM1", "N"]
        assert dictionary.column_count == 5

    def test_slot_offsets(self, dictionary):
        assert dictionary.slot_offset("HDR") == 0
        assert dictionary.slot_offset("LN") == 1
        assert dictionary.slot_offset("NM1") == 3
        assert dictionary.slot_offset("N") == 4

    def test_occurs_defaults_to_one(self, dictionary):
        assert dictionary["HDR"] == SegmentDefinition("HDR", 3, 1)

    def test_column_keys_is_a_copy(self, dictionary):
        keys = dictionary.column_keys
        keys.append("EXTRA")
        assert dictionary.column_keys == ["HDR", "LN_1", "LN_2", "NM1", "N"]

    @pytest.mark.parametrize(
        "segment,expected",
        [
            ("HDR*123", "HDR"),
            ("HDR123", "HDR"),  # no element separator: prefix match
            ("NM1*IL*1", "NM1"),
            ("NM1ABCD", "NM1"),  # longest key wins over 'N'
            ("N*X", "N"),
            ("NX", "N"),
            ("NX*1", None),  # token present but unknown
            ("ZZZ*1", None),
            ("", None),
        ]
    )
    def test_classify(self, dictionary, segment, expected):
        assert dictionary.classify(segment) == expected

    def test_classify_custom_element_separator(self, dictionary):
        assert dictionary.classify("LN|01", element_separator="|") == "LN"
        assert dictionary.classify("XX|01", element_separator="|") is None

    def test_classify_separatorless_text_matches_by_prefix(self, dictionary):
        """Without an element separator, any text starting with a key is that segment"""
        assert dictionary.classify("HDRX") == "HDR"
        assert dictionary.classify("HDRX", element_separator="X") == "HDR"
        assert dictionary.classify("ZHDR") is None

    def test_is_read_only_mapping(self, dictionary):
        assert list(dictionary) == ["HDR", "LN", "NM1", "N"]
        assert len(dictionary) == 4
        with pytest.raises(TypeError):
            dictionary["NEW"] = SegmentDefinition("NEW", 1)

    def test_duplicate_key_rejected(self):
        with pytest.raises(ValueError, match="Duplicate"):
            SegmentDictionary([SegmentDefinition("A", 1), SegmentDefinition("A", 2)])

    def test_empty_dictionary_rejected(self):
        with pytest.raises(ValueError):
            SegmentDictionary([])

    def test_missing_size_rejected(self):
        with pytest.raises(ValueError, match="size"):
            SegmentDictionary.from_mapping({"A": {"occurs": 2}})

    @pytest.mark.parametrize(
        "key,size,occurs",
        [
            ("", 1, 1),
            ("A", -1, 1),
            ("A", 1, 0),
        ]
    )
    def test_invalid_definition_rejected(self, key, size, occurs):
        with pytest.raises(ValueError):
            SegmentDefinition(key, size, occurs)

    def test_from_mapping_accepts_definitions(self):
        dictionary = SegmentDictionary.from_mapping({"A": SegmentDefinition("A", 2, 3)})
        assert dictionary.column_keys == ["A_1", "A_2", "A_3"]

    def test_coerce_returns_same_instance(self, dictionary):
        assert SegmentDictionary.coerce(dictionary) is dictionary


class TestDefinition384:
    def test_layout(self):
        dictionary = SegmentDictionary.from_mapping(DEFINITION_384)

        assert dictionary.header_key == SegmentKey.MEMBER_LEVEL_DETAIL.value
        assert list(dictionary) == [key.value for key in SegmentKey]
        assert dictionary.column_count == 1 + 5 + 3 + 2 + 7
        assert dictionary.column_keys[:4] == ["INS", "REF_1", "REF_2", "REF_3"]
        assert dictionary["NM1"] == SegmentDefinition("NM1", 9, 2)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
