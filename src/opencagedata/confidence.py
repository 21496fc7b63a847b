"""Map OpenCage confidence scores to an accuracy radius in metres."""

import math

# https://opencagedata.com/api#confidence
_RADIUS_BY_CONFIDENCE = {
    10: 250.0,
    9: 500.0,
    8: 1000.0,
    7: 5000.0,
    6: 7500.0,
    5: 10000.0,
    4: 15000.0,
    3: 20000.0,
    2: 25000.0,
    1: math.inf,
    0: math.nan,
}


def radius_in_meters(confidence: object) -> float:
    """
    Return the accuracy radius for *confidence* (0-10).

    Anything that is not one of the integer keys of the table, bools
    included, yields NaN. A confidence of 0 is itself mapped to NaN.
    """
    if not isinstance(confidence, int) or isinstance(confidence, bool):
        return math.nan
    if confidence not in _RADIUS_BY_CONFIDENCE:
        return math.nan
    return _RADIUS_BY_CONFIDENCE[confidence]
