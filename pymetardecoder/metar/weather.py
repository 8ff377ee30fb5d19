################################################################################
# pymetardecoder/metar/weather.py
#
# Output records for decoded METARs
#
# 2026-10-19:
#   * First version
################################################################################
# CONFIGURATION
################################################################################
WIND_VARIABLE = -1
ALTITUDE_NOT_APPLICABLE = -1
STATION_MAX_LEN = 10
################################################################################
# CLASSES
################################################################################
class CloudLayer(object):
    """
    A single reported cloud layer

    :param string cover: Description of the cloud cover
    :param int altitude: Base of the layer in hundreds of feet, or ALTITUDE_NOT_APPLICABLE
    :param boolean show_altitude: True if the altitude is meaningful for this cover
    :param string modifier: Description of the layer type (e.g. cumulonimbus) or ""
    """
    def __init__(self, cover, altitude=ALTITUDE_NOT_APPLICABLE, show_altitude=False, modifier=""):
        self.cover = cover
        self.altitude = altitude
        self.show_altitude = show_altitude
        self.modifier = modifier
    def __eq__(self, other):
        if not isinstance(other, CloudLayer):
            return NotImplemented
        return vars(self) == vars(other)
    def __repr__(self):
        return "CloudLayer({})".format(vars(self))
class WeatherReport(object):
    """
    Decoded METAR. Singular fields are None until a group sets them
    """
    def __init__(self):
        self.station = None
        self.day = None
        self.time = None
        self.wind_direction = None
        self.wind_speed = None
        self.wind_gust = None
        self.wind_unit = None
        self.visibility = None
        self.visibility_unit = None
        self.temperature = None
        self.dewpoint = None
        self.pressure = None
        self.pressure_unit = None
        self.pressure_decimals = 0
        self.maintenance_needed = False
        self.clouds = []
        self.phenomena = []
    @property
    def wind_variable(self):
        return self.wind_direction == WIND_VARIABLE
    def add_cloud(self, cloud):
        self.clouds.append(cloud)
    def add_phenomenon(self, phenomenon):
        self.phenomena.append(phenomenon)
    def __repr__(self):
        return str(vars(self))
