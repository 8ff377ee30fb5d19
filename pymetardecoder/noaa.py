################################################################################
# pymetardecoder/noaa.py
#
# Retrieval of METARs from the aviationweather.gov data server. The server
# wraps each report in an XML envelope:
#
#   <response>
#     <data num_results="1">
#       <METAR>
#         <raw_text>KSFO 241256Z 28009KT 10SM FEW008 13/11 A2992</raw_text>
#         <observation_time>2016-09-24T12:56:00Z</observation_time>
#         ...
#
# 2026-10-19:
#   * First version
################################################################################
# CONFIGURATION
################################################################################
import os, logging
import xml.etree.ElementTree as ET
import httpx
from pymetardecoder import EnvelopeError, FetchError, StationNotFound

# Station identifier is appended to the URL. METARURL overrides it
DEFAULT_URL     = "https://aviationweather.gov/api/data/metar?format=xml&ids="
DEFAULT_TIMEOUT = 15.0
URL_ENV_VAR     = "METARURL"
################################################################################
# CLASSES
################################################################################
class StationReport(object):
    """
    Report and station metadata extracted from the XML envelope

    :param string report: Raw METAR
    :param string date: Observation time, e.g. "2016-09-24 12:56:00Z"
    :param float latitude: Station latitude
    :param float longitude: Station longitude
    :param float elevation_m: Station elevation in metres
    :param string category: Flight category (VFR, MVFR, IFR, LIFR)
    """
    def __init__(self, report, date="", latitude=None, longitude=None, elevation_m=None, category=""):
        self.report = report
        self.date = date
        self.latitude = latitude
        self.longitude = longitude
        self.elevation_m = elevation_m
        self.category = category
    def __repr__(self):
        return str(vars(self))
class Fetcher(object):
    """
    HTTP client for the METAR data server

    :param string url: Base URL. Defaults to $METARURL, then DEFAULT_URL
    :param float timeout: Request timeout in seconds
    :param httpx.Client client: Client to use instead of a new one
    """
    def __init__(self, url=None, timeout=DEFAULT_TIMEOUT, client=None):
        if url is None:
            url = os.environ.get(URL_ENV_VAR)
            if url:
                logging.info("Using environment variable {}: {}".format(URL_ENV_VAR, url))
            else:
                url = DEFAULT_URL
        self.url = url
        # Only close clients created here
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client(timeout=timeout, follow_redirects=True)
    def close(self):
        if self._owns_client:
            self._client.close()
    def __enter__(self):
        return self
    def __exit__(self, *exc):
        self.close()
    def fetch(self, station):
        """
        Returns the raw XML envelope for a station

        :param string station: ICAO identifier (case insensitive)
        :rtype: string
        :raises: pymetardecoder.FetchError on network or HTTP errors
        """
        url = "{}{}".format(self.url, station.upper())
        logging.debug("Retrieving URL {}".format(url))
        try:
            resp = self._client.get(url)
            resp.raise_for_status()
        except httpx.HTTPError as e:
            raise FetchError(station, str(e))
        logging.debug("Received XML:\n{}".format(resp.text))
        return resp.text
    def fetch_station(self, station):
        return parse_envelope(self.fetch(station), station=station.upper())
################################################################################
# FUNCTIONS
################################################################################
def _text(node, tag):
    child = node.find(tag)
    if child is None or child.text is None:
        return None
    return child.text.strip()
def _float(node, tag):
    val = _text(node, tag)
    if val is None:
        return None
    try:
        return float(val)
    except ValueError:
        logging.warning("{} is not a valid value for {}".format(val, tag))
        return None
def parse_envelope(xml_text, station=""):
    """
    Extracts the METAR and station metadata from the server's XML

    :param string xml_text: XML envelope
    :param string station: Station requested, used in error messages
    :rtype: StationReport
    :raises: pymetardecoder.StationNotFound unless exactly one METAR was returned
    :raises: pymetardecoder.EnvelopeError if the XML cannot be interpreted
    """
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as e:
        raise EnvelopeError(str(e))

    # Get the number of results
    data = root.find("data")
    if data is None:
        raise EnvelopeError("no data element")
    num_results = data.get("num_results")
    try:
        num_results = int(num_results) if num_results is not None else len(data.findall("METAR"))
    except ValueError:
        raise EnvelopeError("{} is not a valid number of results".format(num_results))
    logging.debug("num_results = {}".format(num_results))
    if num_results != 1:
        raise StationNotFound(station, num_results)

    # Get the report
    metar = data.find("METAR")
    if metar is None:
        raise EnvelopeError("no METAR element")
    report = _text(metar, "raw_text")
    if report is None:
        raise EnvelopeError("no raw_text element")

    return StationReport(
        report,
        date        = (_text(metar, "observation_time") or "").replace("T", " "),
        latitude    = _float(metar, "latitude"),
        longitude   = _float(metar, "longitude"),
        elevation_m = _float(metar, "elevation_m"),
        category    = _text(metar, "flight_category") or ""
    )
