################################################################################
# pymetardecoder/conversion.py
#
# Conversion functions for pymetardecoder
#
# 2026-10-19:
#   * First version
################################################################################
# CONFIGURATION
################################################################################
FEET_PER_METRE = 3.28084
COMPASS_POINTS = [
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW"
]
################################################################################
# EXCEPTION CLASSES
################################################################################
class ConversionError(Exception):
    def __init__(self, val, unit_from, unit_to):
        self.msg = "Cannot convert {} from {} to {}".format(val, unit_from, unit_to)
        super().__init__(self.msg)
################################################################################
# FUNCTIONS
################################################################################
def _convert(x, factor=1, intercept=0):
    """
    Converts a value using y = mx + c
    """
    return (factor * x) + intercept
def convert(val, unit_from, unit_to, unit_type):
    """
    Converts value from one unit to another

    :param numeric val: Value to convert
    :param str unit_from: Convert from this unit
    :param str unit_to: Convert to this unit
    :param str unit_type: Type of unit
    :returns: Converted value
    :rtype: numeric
    """
    if unit_type == "length":
        return _convert_length(val, unit_from, unit_to)
    else:
        raise ValueError("Cannot convert unit type '{}'".format(unit_type))
def _convert_length(val, unit_from, unit_to):
    if unit_from == unit_to:
        return val
    if unit_from == "m" and unit_to == "ft":
        return _convert(val, factor=FEET_PER_METRE)
    elif unit_from == "ft" and unit_to == "m":
        return _convert(val, factor=1 / FEET_PER_METRE)

    # If we have reached this point, we are unable to convert
    raise ConversionError(val, unit_from, unit_to)
def metres_to_feet(metres):
    return convert(metres, "m", "ft", "length")
def apply_decimals(val, decimals):
    """
    Scales a fixed point value by its number of implied decimal places

    :param int val: Stored value, e.g. 2992
    :param int decimals: Implied decimal places, e.g. 2
    :returns: Scaled value, e.g. 29.92
    :rtype: numeric
    """
    if not decimals:
        return val
    return val / (10 ** decimals)
def compass_point(degrees):
    """
    Returns the 16 point compass direction for a direction in degrees
    """
    return COMPASS_POINTS[((degrees * 4 + 45) // 90) % 16]
