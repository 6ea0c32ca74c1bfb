from enum import Enum


class SegmentKey(str, Enum):
    """Segment types of the 384 eligibility file"""

    MEMBER_LEVEL_DETAIL = "INS"  # Record header - 17 chars
    REFERENCE_IDENTIFICATION = "REF"  # Up to 5 per member - 2 chars
    DATE_TIME_PERIOD = "DTP"  # Up to 3 per member - 3 chars
    INDIVIDUAL_NAME = "NM1"  # Up to 2 per member - 9 chars
    CONTACT_INFORMATION = "PER"  # 8 chars
    ADDRESS = "N3"  # 2 chars
    GEOGRAPHIC_LOCATION = "N4"  # 3 chars
    DEMOGRAPHICS = "DMG"  # 3 chars
    HEALTH_INFORMATION = "HLH"  # 3 chars
    HEALTH_COVERAGE = "HD"  # 5 chars
    MONETARY_AMOUNT = "AMT"  # 2 chars


class AccumulatorState(Enum):
    """Record accumulator states"""
    IDLE = 0  # No header seen yet
    COLLECTING = 1  # Buffering segments of the current record
