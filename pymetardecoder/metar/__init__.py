################################################################################
# pymetardecoder/metar/__init__.py
#
# METAR decoder module for pymetardecoder
#
# 2026-10-19:
#   * First version
################################################################################
# CONFIGURATION
################################################################################
import logging
import pymetardecoder
from . import observations as obs
from .weather import WeatherReport, CloudLayer, WIND_VARIABLE, ALTITUDE_NOT_APPLICABLE

# Observations hold no state between groups, so one set serves every report
RECOGNIZERS = tuple(obs.recognizers())
################################################################################
# REPORT CLASSES
################################################################################
class METAR(pymetardecoder.Report):
    def _decode(self, message):
        """
        Decodes the METAR body and returns a WeatherReport. Groups that no
        observation recognises are skipped
        """
        data = WeatherReport()
        for group in self.groups(message):
            logging.debug("Parsing token `{}'".format(group))
            if not any(r.decode(group, data) for r in RECOGNIZERS):
                logging.debug("Unmatched token = {}".format(group))
        return data
    @staticmethod
    def groups(message):
        """
        Splits the message into groups, after stripping trailing newlines.
        Repeated spaces do not produce empty groups
        """
        if not message:
            return []
        return [g for g in message.rstrip("\r\n").split(" ") if g]
################################################################################
# FUNCTIONS
################################################################################
def parse_metar(message):
    """
    Decodes a METAR

    :param string message: METAR body, e.g. "EHAM 241225Z 24015G25KT 9999 BKN035CB 12/08 Q1013"
    :returns: Decoded report
    :rtype: WeatherReport
    """
    return METAR().decode(message)
