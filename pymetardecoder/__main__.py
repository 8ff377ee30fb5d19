################################################################################
# pymetardecoder/__main__.py
#
# Command line interface: print (and optionally decode) the latest METAR for
# one or more stations
#
# 2026-10-19:
#   * First version
################################################################################
# CONFIGURATION
################################################################################
import sys, argparse, logging
import pymetardecoder
from pymetardecoder import noaa, render
from pymetardecoder.metar import parse_metar
################################################################################
# CLASSES
################################################################################
class ArgumentParser(argparse.ArgumentParser):
    """
    Argument parser which reports usage errors with exit code 1
    """
    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, "{}: error: {}\n".format(self.prog, message))
################################################################################
# FUNCTIONS
################################################################################
def build_parser():
    parser = ArgumentParser(
        prog="metar",
        description="Print meteorological reports (METARs) for STATIONs.",
        epilog="Example: metar -d ehgr",
        add_help=False
    )
    parser.add_argument("stations", nargs="*", metavar="STATION",
        help="ICAO airport code (e.g. ksfo)")
    parser.add_argument("-d", dest="decode", action="store_true", help="decode metar")
    parser.add_argument("-l", dest="location", action="store_true", help="print location of the station")
    parser.add_argument("-t", dest="datetime", action="store_true", help="print the time and date of the observation")
    parser.add_argument("-c", dest="category", action="store_true", help="print flight category (VFR, MVFR, IFR, LIFR)")
    parser.add_argument("-v", dest="verbose", action="store_true", help="be verbose")
    parser.add_argument("-h", dest="help", action="store_true", help="show this help")
    return parser
def show_station(fetcher, station, args, out):
    """
    Fetches and prints the report for a single station

    :returns: True if the station was reported, False otherwise
    """
    try:
        data = fetcher.fetch_station(station)
    except pymetardecoder.StationNotFound as e:
        logging.debug(str(e))
        prefix = " " * 21 if args.datetime else ""
        out.write("{}{} is not a valid ICAO airport identifier.\n".format(prefix, station))
        return False
    except (pymetardecoder.FetchError, pymetardecoder.EnvelopeError) as e:
        logging.error(str(e))
        return False

    line = data.report
    if args.datetime:
        line = "{} {}".format(data.date, line)
    if args.category:
        line = "{} {}".format(line, data.category)
    out.write(line + "\n")

    if args.decode:
        out.write(render.render(parse_metar(data.report)) + "\n")
    if args.location:
        out.write(render.render_location(data) + "\n")
    return True
def main(argv=None, fetcher=None, out=None):
    """
    Runs the command line interface

    :param list argv: Arguments (default: sys.argv[1:])
    :param noaa.Fetcher fetcher: Fetcher to use (default: a new one)
    :param file out: Output stream (default: sys.stdout)
    :returns: Exit code
    :rtype: int
    """
    if out is None:
        out = sys.stdout
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.help:
        parser.print_help(out)
        return 1
    if not args.stations:
        parser.print_usage(out)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s"
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    if fetcher is None:
        fetcher = noaa.Fetcher()
    with fetcher:
        for station in args.stations:
            show_station(fetcher, station, args, out)
    return 0
def run():
    sys.exit(main())
if __name__ == "__main__":
    run()
