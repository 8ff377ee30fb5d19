################################################################################
# pymetardecoder/__init__.py
#
# Main __init__ script for pymetardecoder
#
# 2026-10-19:
#   * First version
################################################################################
# IMPORTS
################################################################################
import json, logging, re
################################################################################
# EXCEPTION CLASSES
################################################################################
class DecodeError(Exception):
    def __init__(self, msg):
        self.msg = msg
        super().__init__(self.msg)
    def __str__(self):
        return self.msg
class InvalidCode(Exception):
    def __init__(self, val, desc):
        self.msg = "{} is not a valid code for {}".format(val, desc)
        super().__init__(self.msg)
class FetchError(Exception):
    def __init__(self, station, msg):
        self.station = station
        self.msg = "unable to retrieve data for station {}: {}".format(station, msg)
        super().__init__(self.msg)
class StationNotFound(Exception):
    def __init__(self, station, num_results):
        self.station = station
        self.num_results = num_results
        self.msg = "{} results returned for station {}".format(num_results, station)
        super().__init__(self.msg)
class EnvelopeError(Exception):
    def __init__(self, msg):
        self.msg = "invalid XML envelope: {}".format(msg)
        super().__init__(self.msg)
################################################################################
# BASE CLASSES
################################################################################
class Report(object):
    """
    Base class for a meteorological report
    """
    def decode(self, message):
        """
        Decode function. Any unexpected failure is a defect in the decoder,
        which is reported as a DecodeError
        """
        try:
            self.data = self._decode(message)
            return self.data
        except DecodeError:
            raise
        except Exception as e:
            raise DecodeError("Unable to decode {!r}: {}".format(message, e))
    def _decode(self, message):
        """
        Actual decode function. Implement in subclass
        """
        raise NotImplementedError("_decode needs to be implemented in {} subclass".format(type(self).__name__))
    def toJSON(self):
        return json.dumps(self.data, cls=ObsEncoder)
class Observation(object):
    """
    Base class for an Observation, i.e. a recognizer for a single group of a
    coded report

    Subclasses set _VALID_REGEXP (a compiled pattern or a string) and implement
    _decode(match, data), which writes the decoded values into data.
    """
    _GATED = True
    def __init__(self):
        if isinstance(self._VALID_REGEXP, str):
            self._regexp = re.compile(self._VALID_REGEXP)
        else:
            self._regexp = self._VALID_REGEXP
    def is_set(self, data):
        """
        Checks if the observation has already been decoded into data

        :param data: Report data being accumulated
        :returns: True if the field is already populated
        :rtype: boolean
        """
        return getattr(data, self._ATTR) is not None
    def match(self, group):
        return self._regexp.match(group)
    def decode(self, group, data):
        """
        Decodes group into data, if this observation recognises it

        :param string group: Group (token) to decode
        :param data: Report data being accumulated
        :returns: True if the group was consumed, False otherwise
        :rtype: boolean
        """
        if self._GATED and self.is_set(data):
            return False
        match = self.match(group)
        if match is None:
            return False
        self._decode(match, data)
        return True
    def _decode(self, match, data):
        """
        Actual decode function. Implement in subclass
        """
        raise NotImplementedError("_decode needs to be implemented in {} subclass".format(type(self).__name__))
    def __repr__(self):
        return "{}({})".format(type(self).__name__, self._regexp.pattern)
class ObsEncoder(json.JSONEncoder):
    def default(self, o):
        return o.__dict__
