################################################################################
# pymetardecoder/render.py
#
# Human readable rendering of decoded METARs
#
# 2026-10-19:
#   * First version
################################################################################
# CONFIGURATION
################################################################################
from pymetardecoder import conversion
LABEL_WIDTH = 14
INDENT = " " * (LABEL_WIDTH + 2)
MAINTENANCE_WARNING = "WARNING: Maintenance is needed on this station."
################################################################################
# FUNCTIONS
################################################################################
def _line(label, value=None):
    if value is None:
        value = ""
    return "{}: {}".format(label.ljust(LABEL_WIDTH), value).rstrip()
def _lines(label, values):
    """
    Renders a list of values, the first one next to the label and the others
    aligned beneath it
    """
    if not values:
        return [_line(label)]
    out = [_line(label, values[0])]
    out.extend(INDENT + v for v in values[1:])
    return out
def _with_unit(val, unit):
    if val is None:
        return None
    return "{} {}".format(val, unit) if unit else str(val)
def format_time(time):
    if time is None:
        return None
    return "{:02d}:{:02d} UTC".format(time // 100, time % 100)
def format_wind_direction(report):
    if report.wind_direction is None:
        return None
    if report.wind_variable:
        return "Variable"
    return "{} ({})".format(report.wind_direction, conversion.compass_point(report.wind_direction))
def format_pressure(report):
    if report.pressure is None:
        return None
    value = conversion.apply_decimals(report.pressure, report.pressure_decimals)
    return "{:.{}f} {}".format(value, report.pressure_decimals, report.pressure_unit)
def format_cloud(cloud):
    if cloud.show_altitude:
        return "{} at {} ft{}".format(cloud.cover, cloud.altitude * 100, cloud.modifier)
    return "{}{}".format(cloud.cover, cloud.modifier)
def render(report):
    """
    Renders a decoded METAR as a block of labelled lines

    :param WeatherReport report: Decoded report
    :rtype: string
    """
    out = [
        _line("Station", report.station),
        _line("Day", report.day),
        _line("Time", format_time(report.time)),
        _line("Wind direction", format_wind_direction(report)),
        _line("Wind speed", _with_unit(report.wind_speed, report.wind_unit)),
        _line("Wind gust", _with_unit(report.wind_gust, report.wind_unit)),
        _line("Visibility", _with_unit(report.visibility, report.visibility_unit)),
        _line("Temperature", _with_unit(report.temperature, "C")),
        _line("Dewpoint", _with_unit(report.dewpoint, "C")),
        _line("Pressure", format_pressure(report)),
    ]
    out.extend(_lines("Clouds", [format_cloud(c) for c in report.clouds]))
    out.extend(_lines("Phenomena", report.phenomena))
    if report.maintenance_needed:
        out.append(MAINTENANCE_WARNING)
    return "\n".join(out) + "\n"
def render_location(station_report):
    """
    Renders the position of the reporting station

    :param StationReport station_report: Station data from the XML envelope
    :rtype: string
    """
    out = []
    if station_report.latitude is not None and station_report.longitude is not None:
        out.append(_line("Lat, Lon", "{:.3f}, {:.3f}".format(station_report.latitude, station_report.longitude)))
    if station_report.elevation_m is not None:
        out.append(_line("Elevation", "{:.1f} Meters, {:.1f} Feet".format(
            station_report.elevation_m, conversion.metres_to_feet(station_report.elevation_m)
        )))
    return "\n".join(out)
