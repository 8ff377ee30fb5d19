################################################################################
# pymetardecoder/tests/test_noaa.py
#
# Unit tests for retrieval, the XML envelope and the command line. Requires
# pytest. No test touches the network
#
# 2026-10-19:
#   * First version
################################################################################
# CONFIGURATION
################################################################################
import io
import httpx
import pytest
from pymetardecoder import noaa, EnvelopeError, FetchError, StationNotFound
from pymetardecoder.__main__ import main

URL = "https://metar.example/data?ids="
RAW = "KSFO 241256Z 28009KT 10SM FEW008 13/11 A2992"
ENVELOPE = """<?xml version="1.0" encoding="UTF-8"?>
<response version="1.2">
  <data num_results="{num_results}">
    <METAR>
      <raw_text>{raw}</raw_text>
      <station_id>KSFO</station_id>
      <observation_time>2016-09-24T12:56:00Z</observation_time>
      <latitude>37.62</latitude>
      <longitude>-122.37</longitude>
      <elevation_m>3.0</elevation_m>
      <flight_category>VFR</flight_category>
    </METAR>
  </data>
</response>
"""
def envelope(num_results=1, raw=RAW):
    return ENVELOPE.format(num_results=num_results, raw=raw)
def mock_fetcher(handler, url=URL):
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return noaa.Fetcher(url=url, client=client)
################################################################################
# CLASSES
################################################################################
class TestEnvelope:
    """
    Tests extraction of the report from the XML envelope
    """
    def test_values(self):
        data = noaa.parse_envelope(envelope())
        assert data.report == RAW
        assert data.date == "2016-09-24 12:56:00Z"
        assert data.latitude == pytest.approx(37.62)
        assert data.longitude == pytest.approx(-122.37)
        assert data.elevation_m == pytest.approx(3.0)
        assert data.category == "VFR"
    @pytest.mark.parametrize("num_results", [0, 2])
    def test_not_found(self, num_results):
        with pytest.raises(StationNotFound) as e:
            noaa.parse_envelope(envelope(num_results=num_results), station="KSFO")
        assert e.value.num_results == num_results
        assert e.value.station == "KSFO"
    def test_malformed(self):
        with pytest.raises(EnvelopeError):
            noaa.parse_envelope("<response><data>")
    def test_no_data(self):
        with pytest.raises(EnvelopeError):
            noaa.parse_envelope("<response><errors/></response>")
    def test_no_raw_text(self):
        xml = '<response><data num_results="1"><METAR><station_id>KSFO</station_id></METAR></data></response>'
        with pytest.raises(EnvelopeError):
            noaa.parse_envelope(xml)
    def test_optional_fields(self):
        xml = '<response><data num_results="1"><METAR><raw_text>{}</raw_text></METAR></data></response>'.format(RAW)
        data = noaa.parse_envelope(xml)
        assert data.report == RAW
        assert data.date == ""
        assert data.latitude is None
        assert data.elevation_m is None
        assert data.category == ""
class TestFetcher:
    """
    Tests HTTP retrieval
    """
    def test_fetch_station(self):
        requested = []
        def handler(request):
            requested.append(str(request.url))
            return httpx.Response(200, text=envelope())
        with mock_fetcher(handler) as fetcher:
            data = fetcher.fetch_station("ksfo")
        assert requested == [URL + "KSFO"]
        assert data.report == RAW
    def test_http_error(self):
        with mock_fetcher(lambda request: httpx.Response(500)) as fetcher:
            with pytest.raises(FetchError):
                fetcher.fetch("KSFO")
    def test_connect_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)
        with mock_fetcher(handler) as fetcher:
            with pytest.raises(FetchError):
                fetcher.fetch("KSFO")
    def test_env_url(self, monkeypatch):
        monkeypatch.setenv(noaa.URL_ENV_VAR, URL)
        with httpx.Client() as client:
            assert noaa.Fetcher(client=client).url == URL
    def test_default_url(self, monkeypatch):
        monkeypatch.delenv(noaa.URL_ENV_VAR, raising=False)
        with httpx.Client() as client:
            assert noaa.Fetcher(client=client).url == noaa.DEFAULT_URL
    def test_supplied_client_left_open(self):
        client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(200, text=envelope())))
        with noaa.Fetcher(url=URL, client=client) as fetcher:
            fetcher.fetch("KSFO")
        assert not client.is_closed
        assert client.get(URL + "KSFO").status_code == 200
        client.close()
    def test_own_client_closed(self):
        fetcher = noaa.Fetcher(url=URL)
        fetcher.close()
        assert fetcher._client.is_closed
class TestCommandLine:
    """
    Tests the command line interface
    """
    def run(self, argv, body=None):
        if body is None:
            body = envelope()
        out = io.StringIO()
        fetcher = mock_fetcher(lambda request: httpx.Response(200, text=body))
        code = main(argv, fetcher=fetcher, out=out)
        return code, out.getvalue().splitlines()
    def test_raw(self):
        code, lines = self.run(["ksfo"])
        assert code == 0
        assert lines == [RAW]
    def test_date_and_category(self):
        code, lines = self.run(["-t", "-c", "ksfo"])
        assert lines[0] == "2016-09-24 12:56:00Z {} VFR".format(RAW)
    def test_decode(self):
        code, lines = self.run(["-d", "ksfo"])
        assert lines[0] == RAW
        assert "Station       : KSFO" in lines
        assert 'Pressure      : 29.92 "Hg' in lines
        assert "Clouds        : Few clouds at 800 ft" in lines
    def test_location(self):
        code, lines = self.run(["-l", "ksfo"])
        assert "Lat, Lon      : 37.620, -122.370" in lines
    def test_not_found(self):
        code, lines = self.run(["xx"], body=envelope(num_results=0))
        assert code == 0
        assert lines == ["xx is not a valid ICAO airport identifier."]
    def test_several_stations(self):
        code, lines = self.run(["ksfo", "ksfo"])
        assert lines == [RAW, RAW]
    def test_no_stations(self):
        code, lines = self.run([])
        assert code == 1
        assert lines[0].startswith("usage:")
    def test_bad_option(self):
        with pytest.raises(SystemExit) as e:
            self.run(["-x", "ksfo"])
        assert e.value.code == 1
    def test_help(self):
        code, lines = self.run(["-h"])
        assert code == 1
        assert lines[0].startswith("usage:")
