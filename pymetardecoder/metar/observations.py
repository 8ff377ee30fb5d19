################################################################################
# pymetardecoder/metar/observations.py
#
# Observation classes from METAR
#
# 2026-10-19:
#   * First version
################################################################################
# CONFIGURATION
################################################################################
from pymetardecoder import Observation, logging
from . import code_tables as ct
from .weather import CloudLayer, WIND_VARIABLE, ALTITUDE_NOT_APPLICABLE, STATION_MAX_LEN
################################################################################
# SINGULAR OBSERVATIONS
################################################################################
class Station(Observation):
    """
    Station identifier

    * CCCC - ICAO location indicator. The first all-letter group is taken
    """
    _ATTR = "station"
    _VALID_REGEXP = "^([A-Z]+)$"
    def _decode(self, match, data):
        data.station = match.group(1)[:STATION_MAX_LEN]
        logging.debug("Found station {}".format(data.station))
class ObservationTime(Observation):
    """
    Observation time

    * YYGGggZ - day of month, hour and minute (UTC)
    """
    _ATTR = "day"
    _VALID_REGEXP = r"^([0-9]{2})([0-9]{4})Z$"
    def _decode(self, match, data):
        data.day  = int(match.group(1))
        data.time = int(match.group(2))
        logging.debug("Found day/time {}/{:04d}".format(data.day, data.time))
class SurfaceWind(Observation):
    """
    Surface wind

    * dddffGfmfmKT - direction (or VRB), speed, optional gust, unit
    """
    _ATTR = "wind_direction"
    _VALID_REGEXP = r"^(VRB|[0-9]{3})([0-9]{2})(G[0-9]+)?(KT)$"
    def _decode(self, match, data):
        (ddd, ff, gust, unit) = match.groups()
        data.wind_direction = WIND_VARIABLE if ddd == "VRB" else int(ddd)
        data.wind_speed = int(ff)
        data.wind_gust = int(gust[1:]) if gust is not None else data.wind_speed
        data.wind_unit = unit
        logging.debug("Found wind dir/speed/gust/unit {}/{}/{}/{}".format(
            data.wind_direction, data.wind_speed, data.wind_gust, data.wind_unit
        ))
class Visibility(Observation):
    """
    Prevailing visibility

    * VVVV - metres, or VVSM - statute miles
    """
    _ATTR = "visibility"
    _VALID_REGEXP = r"^([0-9]+)(SM)?$"
    _DEFAULT_UNIT = "M"
    def _decode(self, match, data):
        data.visibility = int(match.group(1))
        data.visibility_unit = match.group(2) or self._DEFAULT_UNIT
        logging.debug("Found visibility/unit {}/{}".format(data.visibility, data.visibility_unit))
class Temperature(Observation):
    """
    Air and dewpoint temperature

    * TT/TdTd - whole degrees Celsius, M prefix for negative values
    """
    _ATTR = "temperature"
    _VALID_REGEXP = r"^(M?)([0-9]+)/(M?)([0-9]+)$"
    def _decode(self, match, data):
        (t_sign, t, d_sign, d) = match.groups()
        data.temperature = self._signed(t_sign, t)
        data.dewpoint = self._signed(d_sign, d)
        logging.debug("Found temp/dewpoint {}/{}".format(data.temperature, data.dewpoint))
    @staticmethod
    def _signed(sign, val):
        return -int(val) if sign == "M" else int(val)
class Pressure(Observation):
    """
    Altimeter setting (QNH)

    * QPPPP - hectopascals
    * APPPP - hundredths of inches of mercury
    """
    _ATTR = "pressure"
    _VALID_REGEXP = r"^([QA])([0-9]+)$"
    # unit, implied decimal places
    _UNITS = {
        "Q": ("hPa", 0),
        "A": ('"Hg', 2),
    }
    _UNKNOWN_UNIT = ("Unkn", 0)
    def _decode(self, match, data):
        (unit, decimals) = self._UNITS.get(match.group(1), self._UNKNOWN_UNIT)
        data.pressure = int(match.group(2))
        data.pressure_unit = unit
        data.pressure_decimals = decimals
        logging.debug("Found pressure/unit {}/{}".format(data.pressure, data.pressure_unit))
################################################################################
# REPEATING OBSERVATIONS
################################################################################
class Cloud(Observation):
    """
    Cloud layer. May occur several times in a report

    * SKC, CLR, NSC, NCD - no clouds
    * NsNsNshshshs(CC) - cover, height in hundreds of feet, optional type
    """
    _GATED = False
    _VALID_REGEXP = ct.CLOUD_REGEXP
    def _decode(self, match, data):
        (no_cloud, cover, height, modifier) = match.groups()
        if no_cloud is not None:
            entry = ct.CloudTable.lookup(no_cloud)
            layer = CloudLayer(
                entry.description,
                altitude=ALTITUDE_NOT_APPLICABLE,
                show_altitude=entry.policy == ct.SHOW
            )
        else:
            entry = ct.CloudTable.lookup(cover)
            layer = CloudLayer(
                entry.description,
                altitude=int(height),
                show_altitude=entry.policy == ct.SHOW,
                modifier=ct.CloudTable.decode(modifier) if modifier is not None else ""
            )
        data.add_cloud(layer)
        logging.debug("Found cloud cover/alt {}/{}".format(layer.cover, layer.altitude))
class Weather(Observation):
    """
    Present weather. May occur several times in a report

    * (+|-)w'w' - intensity followed by one or more two letter codes
    * CAVOK - ceiling and visibility OK
    """
    _GATED = False
    _VALID_REGEXP = ct.PHENOMENON_REGEXP
    def decode(self, group, data):
        cavok = ct.CAVOK in group
        if cavok:
            data.add_phenomenon(ct.CAVOK_DESCRIPTION)
            logging.debug("Found phenomenon {}".format(ct.CAVOK_DESCRIPTION))
        return super().decode(group, data) or cavok
    def _decode(self, match, data):
        (intensity, codes) = match.groups()
        words = []
        if intensity:
            words.append(ct.INTENSITY[intensity])
        words.extend(ct.PhenomenonTable.decode(c) for c in ct.PhenomenonTable.split(codes))
        phenomenon = " ".join(words)
        data.add_phenomenon(phenomenon)
        logging.debug("Found phenomenon {}".format(phenomenon))
class Maintenance(Observation):
    """
    Maintenance indicator

    * $ - the station requires maintenance
    """
    _GATED = False
    _VALID_REGEXP = r"^\$"
    def _decode(self, match, data):
        data.maintenance_needed = True
        logging.debug("Found maintenance indicator")
################################################################################
# RECOGNIZER ORDER
################################################################################
def recognizers():
    """
    Returns the observations in the order they are tried against each group
    """
    return [
        Station(),
        ObservationTime(),
        SurfaceWind(),
        Visibility(),
        Temperature(),
        Pressure(),
        Cloud(),
        Weather(),
        Maintenance(),
    ]
