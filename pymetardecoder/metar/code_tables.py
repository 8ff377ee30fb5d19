################################################################################
# pymetardecoder/metar/code_tables.py
#
# Code tables for decoding METARs
#
# 2026-10-19:
#   * First version
################################################################################
# CONFIGURATION
################################################################################
import re
from collections import namedtuple
from pymetardecoder.code_tables import CodeTable
################################################################################
# ENTRY TYPES
################################################################################
# Altitude display policies for cloud abbreviations
SHOW           = "show"
HIDE           = "hide"
NOT_APPLICABLE = "not_applicable"

CloudAbbreviation = namedtuple("CloudAbbreviation", ["code", "description", "policy"])
PhenomenonCode    = namedtuple("PhenomenonCode", ["code", "description"])
################################################################################
# CODE TABLE CLASSES
################################################################################
class CloudTable(CodeTable):
    """
    Cloud cover and cloud type abbreviations

    * HIDE entries report the absence of clouds (no layer altitude)
    * SHOW entries report cover amount for a layer with an altitude
    * NOT_APPLICABLE entries are layer type modifiers (e.g. CB)
    """
    _DESCRIPTION = "cloud abbreviation"
    _ENTRIES = (
        CloudAbbreviation("SKC",   "Sky Clear (no clouds within sensors range)", HIDE),
        CloudAbbreviation("CLR",   "Sky Clear Below 12000ft", HIDE),
        CloudAbbreviation("NSC",   "No Significant Clouds below 5000ft/1500m AGL", HIDE),
        CloudAbbreviation("NCD",   "No Clouds Detected below 5000ft/1500m AGL", HIDE),
        CloudAbbreviation("FEW",   "Few clouds", SHOW),
        CloudAbbreviation("SCT",   "Scattered clouds", SHOW),
        CloudAbbreviation("BKN",   "Broken clouds", SHOW),
        CloudAbbreviation("OVC",   "Overcast", SHOW),
        CloudAbbreviation("VV",    "Vertical Visibility", SHOW),
        CloudAbbreviation("TCU",   ", Towering Cumulus clouds in vicinity", NOT_APPLICABLE),
        CloudAbbreviation("CU",    ", Cumulus clouds in vicinity", NOT_APPLICABLE),
        CloudAbbreviation("CB",    ", Cumulonimbus clouds in vicinity", NOT_APPLICABLE),
        CloudAbbreviation("CBMAM", ", Cumulonimbus Mammatus in vicinity (expect turbulent air)", NOT_APPLICABLE),
        CloudAbbreviation("ACC",   ", Altocumulus Castellatus (medium layer_altitude, vigorous instability)", NOT_APPLICABLE),
        CloudAbbreviation("CLD",   ", Standing lenticular or rotor clouds", NOT_APPLICABLE),
    )
    @classmethod
    def with_policy(cls, policy):
        return [e for e in cls._ENTRIES if e.policy == policy]
class PhenomenonTable(CodeTable):
    """
    Two letter present weather codes
    """
    _DESCRIPTION = "weather phenomenon"
    _ENTRIES = (
        PhenomenonCode("MI", "Shallow"),
        PhenomenonCode("BL", "Blowing"),
        PhenomenonCode("BC", "Patches"),
        PhenomenonCode("SH", "Showers"),
        PhenomenonCode("PR", "Partials"),
        PhenomenonCode("DR", "Drifting"),
        PhenomenonCode("TS", "Thunderstorm"),
        PhenomenonCode("FZ", "Freezing"),
        PhenomenonCode("DZ", "Drizzle"),
        PhenomenonCode("IC", "Ice Crystals"),
        PhenomenonCode("UP", "Unknown Precipitation"),
        PhenomenonCode("RA", "Rain"),
        PhenomenonCode("PL", "Ice Pellets"),
        PhenomenonCode("SN", "Snow"),
        PhenomenonCode("GR", "Hail"),
        PhenomenonCode("SG", "Snow Grains"),
        PhenomenonCode("GS", "Small hail/snow pellets"),
        PhenomenonCode("BR", "Mist"),
        PhenomenonCode("SA", "Sand"),
        PhenomenonCode("FU", "Smoke"),
        PhenomenonCode("HZ", "Haze"),
        PhenomenonCode("FG", "Fog"),
        PhenomenonCode("VA", "Volcanic Ash"),
        PhenomenonCode("PY", "Spray"),
        PhenomenonCode("DU", "Widespread Dust"),
        PhenomenonCode("SQ", "Squall"),
        PhenomenonCode("FC", "Funnel Cloud"),
        PhenomenonCode("SS", "Sand storm"),
        PhenomenonCode("DS", "Dust storm"),
        PhenomenonCode("PO", "Well developed dust/sand swirls"),
        PhenomenonCode("VC", "Vicinity"),
    )
    _CODE_LEN = 2
    @classmethod
    def split(cls, codes):
        """
        Splits a string of concatenated codes into individual codes

        :param string codes: e.g. "SHRA"
        :rtype: list of strings, e.g. ["SH", "RA"]
        """
        return [codes[i:i + cls._CODE_LEN] for i in range(0, len(codes), cls._CODE_LEN)]
################################################################################
# PATTERNS
################################################################################
INTENSITY = {
    "-": "Light",
    "+": "Heavy",
}
CAVOK = "CAVOK"
CAVOK_DESCRIPTION = "Ceiling and visibility OK"

def build_phenomenon_pattern():
    """
    Builds the pattern for a present weather group: an optional intensity
    sign, followed by one or more phenomenon codes written back to back

    Group 1 is the intensity sign, group 2 the concatenated codes

    :rtype: string
    """
    return "^([{}]?)((?:{})+)$".format(
        "".join(re.escape(s) for s in INTENSITY),
        PhenomenonTable.alternation()
    )
def build_cloud_pattern():
    """
    Builds the pattern for a cloud group. Either a "no cloud" code alone
    (group 1), or a cover code (group 2), a three digit layer height in
    hundreds of feet (group 3) and an optional type modifier (group 4)

    :rtype: string
    """
    return "^(?:({})|({})([0-9]{{3}})({})?)$".format(
        CloudTable.alternation(CloudTable.with_policy(HIDE)),
        CloudTable.alternation(CloudTable.with_policy(SHOW)),
        CloudTable.alternation(CloudTable.with_policy(NOT_APPLICABLE))
    )

PHENOMENON_REGEXP = re.compile(build_phenomenon_pattern())
CLOUD_REGEXP      = re.compile(build_cloud_pattern())
