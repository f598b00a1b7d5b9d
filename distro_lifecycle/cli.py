# Release lifecycle queries for Debian and Ubuntu series.
#
# Last Change: October 16, 2026

"""
Usage: ubuntu-lifecycle [OPTIONS]
       debian-lifecycle [OPTIONS]

Answer questions about the lifecycle of Debian and Ubuntu series (which series
is stable, which ones are supported, which one is in development, etc.) as of
today or as of any other date.

Exactly one of the following selectors is required:

  -a, --all

    List all known series.

  -d, --devel

    Show the series that is in development. On Ubuntu this is the nearest
    upcoming release, on Debian this is unstable (sid).

  -l, --latest

    Show the most recently released series.

  -s, --stable

    Show the most recent series that is within standard support.

  --supported

    List all series that are within standard support.

  --unsupported

    List all series that are past their standard end of life date.

  --lts

    List all series that are covered by long term support (Ubuntu LTS server
    support or Debian LTS).

  --esm

    List all series that are covered by Expanded Security Maintenance
    (Ubuntu only).

  --elts

    List all series that are covered by Extended LTS (Debian only).

  -t, --testing

    Show the current testing series (Debian only).

  -o, --oldstable

    Show the series that preceded the current stable series (Debian only).

  --series=NAME

    Show the series with the given series name, code name or version.

  --alias=NAME

    Show the alias (unstable, testing, stable, oldstable) of the given series
    (Debian only).

Supported output options:

  -c, --codename

    Show the series names (this is the default).

  -r, --release

    Show the version numbers (or series names for unnumbered series).

  -f, --fullname

    Show the full names (for example Ubuntu 18.04 LTS "Bionic Beaver").

  -y, --days=MILESTONE

    Show the number of days until the given milestone (created, release, eol
    or one of the extended support columns like eol-server, eol-esm, eol-lts
    or eol-elts). Milestones that have passed result in negative numbers.

  --table

    Show all fields in a table.

Other options:

  --date=YYYY-MM-DD

    Answer the question as of the given date instead of today.

  -F, --file=CSV

    Read the release metadata from the given CSV file instead of
    /usr/share/distro-info or the copy bundled with this program.

  -v, --verbose

    Increase logging verbosity (can be repeated).

  -q, --quiet

    Decrease logging verbosity (can be repeated).

  -V, --version

    Show version number and Python version.

  -h, --help

    Show this message and exit.
"""

# Standard library modules.
import datetime
import getopt
import logging
import sys

# External dependencies.
import coloredlogs
from humanfriendly import InvalidDate, format_table, parse_date
from humanfriendly.terminal import output, usage, warning

# Modules included in our package.
from distro_lifecycle import DistroInfo, __version__
from distro_lifecycle.releases import LoadError, format_date
from distro_lifecycle.status import ConsistencyError, NotFoundError, lifecycle_phase

SELECTOR_OPTIONS = {
    '-a': 'all', '--all': 'all',
    '-d': 'devel', '--devel': 'devel',
    '-l': 'latest', '--latest': 'latest',
    '-s': 'stable', '--stable': 'stable',
    '--supported': 'supported',
    '--unsupported': 'unsupported',
    '--lts': 'lts',
    '--esm': 'esm',
    '--elts': 'elts',
    '-t': 'testing', '--testing': 'testing',
    '-o': 'oldstable', '--oldstable': 'oldstable',
}
"""A dictionary that maps command line options to predicate names."""

OUTPUT_OPTIONS = {
    '-c': 'codename', '--codename': 'codename',
    '-r': 'release', '--release': 'release',
    '-f': 'fullname', '--fullname': 'fullname',
    '--table': 'table',
}
"""A dictionary that maps command line options to output modes."""

# Initialize a logger for this module.
logger = logging.getLogger(__name__)


def debian_main():
    """Command line interface for the ``debian-lifecycle`` program."""
    main('debian')


def ubuntu_main():
    """Command line interface for the ``ubuntu-lifecycle`` program."""
    main('ubuntu')


def main(distributor_id):
    """
    Command line interface shared by the ``debian-lifecycle`` and ``ubuntu-lifecycle`` programs.

    :param distributor_id: The distributor ID (a string like ``debian`` or ``ubuntu``).
    """
    # Initialize logging to the terminal.
    coloredlogs.install()
    # Command line option defaults.
    distro_info = DistroInfo(distributor_id=distributor_id)
    selectors = []
    output_modes = []
    milestone = None
    # Parse the command line arguments.
    try:
        options, arguments = getopt.getopt(sys.argv[1:], 'adlstocrfy:F:vqVh', [
            'all', 'devel', 'latest', 'stable', 'supported', 'unsupported',
            'lts', 'esm', 'elts', 'testing', 'oldstable', 'series=', 'alias=',
            'codename', 'release', 'fullname', 'days=', 'table', 'date=',
            'file=', 'verbose', 'quiet', 'version', 'help',
        ])
        for option, value in options:
            if option in SELECTOR_OPTIONS:
                predicate = SELECTOR_OPTIONS[option]
                if predicate not in distro_info.predicates:
                    msg = "The %s option isn't available for %s!"
                    raise Exception(msg % (option, distributor_id.capitalize()))
                selectors.append((predicate, None))
            elif option == '--series':
                selectors.append(('series', value))
            elif option == '--alias':
                if not hasattr(distro_info.backend, 'get_alias'):
                    msg = "The %s option isn't available for %s!"
                    raise Exception(msg % (option, distributor_id.capitalize()))
                selectors.append(('alias', value))
            elif option in OUTPUT_OPTIONS:
                output_modes.append(OUTPUT_OPTIONS[option])
            elif option in ('-y', '--days'):
                milestones = distro_info.backend.COLUMNS[3:]
                if value not in milestones:
                    msg = "Unknown milestone %r! (expected one of %s)"
                    raise Exception(msg % (value, ', '.join(milestones)))
                output_modes.append('days')
                milestone = value
            elif option == '--date':
                distro_info.as_of = parse_date_option(value)
            elif option in ('-F', '--file'):
                distro_info.data_file = value
            elif option in ('-v', '--verbose'):
                coloredlogs.increase_verbosity()
            elif option in ('-q', '--quiet'):
                coloredlogs.decrease_verbosity()
            elif option in ('-V', '--version'):
                output("Version: %s on Python %i.%i", __version__, sys.version_info[0], sys.version_info[1])
                return
            elif option in ('-h', '--help'):
                usage(__doc__)
                return
            else:
                assert False, "Unhandled option!"
        if arguments:
            msg = "Unexpected positional arguments! (%s)"
            raise Exception(msg % ' '.join(arguments))
        if not selectors:
            usage(__doc__)
            return
        if len(selectors) > 1:
            raise Exception("Please give exactly one selector!")
        if len(output_modes) > 1:
            raise Exception("Please give at most one output option!")
    except Exception as e:
        warning("Error: Failed to parse command line arguments! (%s)" % e)
        sys.exit(1)
    # Answer the question.
    try:
        selector, value = selectors[0]
        if selector == 'alias':
            output(distro_info.alias(value))
        else:
            if selector == 'series':
                records = [distro_info.find_series(value)]
            else:
                records = distro_info.evaluate(selector)
            report_records(distro_info, records, output_modes[0] if output_modes else 'codename', milestone)
    except (LoadError, NotFoundError) as e:
        warning("Error: %s", e)
        sys.exit(1)
    except (ConsistencyError, EnvironmentError) as e:
        logger.error("%s", e)
        sys.exit(1)
    except Exception:
        logger.exception("Encountered unexpected exception! Aborting ..")
        sys.exit(1)


def parse_date_option(value):
    """Convert the argument of the ``--date`` option to a :class:`datetime.date` object."""
    try:
        year, month, day, hour, minute, second = parse_date(value)
        return datetime.date(year, month, day)
    except (InvalidDate, ValueError):
        msg = "Failed to parse date %r! (expected YYYY-MM-DD)"
        raise ValueError(msg % value)


def report_records(distro_info, records, mode, milestone=None):
    """
    Print series records to the terminal.

    :param distro_info: The :class:`~distro_lifecycle.DistroInfo` object.
    :param records: A list of :class:`~distro_lifecycle.releases.SeriesRecord` objects.
    :param mode: One of the strings ``codename``, ``release``, ``fullname``,
                 ``days`` or ``table``.
    :param milestone: The name of the milestone (a string, only used when
                      `mode` is ``days``).
    """
    if mode == 'table':
        columns = distro_info.backend.COLUMNS
        data = []
        for record in records:
            row = [record.version, record.codename, record.series]
            row.extend(format_date(distro_info.get_milestone(record, name)) for name in columns[3:])
            row.append(lifecycle_phase(record, distro_info.as_of))
            data.append(row)
        output(format_table(data, column_names=list(columns) + ['status']))
        return
    for record in records:
        if mode == 'release':
            output(record.version or record.series)
        elif mode == 'fullname':
            output(record.full_name)
        elif mode == 'days':
            days = distro_info.days_until(record, milestone)
            output("(unknown)" if days is None else str(days))
        else:
            output(record.series)
