# Release lifecycle queries for Debian and Ubuntu series.
#
# Last Change: October 16, 2026

"""
Parsing of the release metadata published by the distro-info-data_ package.

The distro-info-data_ package contains CSV files with metadata about Debian
and Ubuntu series: version numbers, code names, the dates on which each series
was created and released and the dates on which (standard and extended)
support ends. This module turns those CSV files into an ordered list of
:class:`SeriesRecord` objects that :mod:`distro_lifecycle.status` can query.

Loading is all or nothing: :func:`load()` either returns every record of the
dataset or raises a :exc:`LoadError`, it never returns a partial result.

To make it possible to use `distro-lifecycle` without direct access to the
CSV files in :data:`DISTRO_INFO_DIRECTORY` a copy of those files is bundled
with the package (see :data:`BUNDLED_DATA_DIRECTORY`).

.. _distro-info-data: https://packages.debian.org/distro-info-data
"""

# Standard library modules.
import collections
import csv
import datetime
import io
import logging
import os
import re

# External dependencies.
from humanfriendly import Timer, pluralize
from property_manager import (
    PropertyManager,
    key_property,
    lazy_property,
    mutable_property,
    required_property,
    writable_property,
)

DISTRO_INFO_DIRECTORY = '/usr/share/distro-info'
"""The pathname of the directory with CSV files containing release metadata (a string)."""

BUNDLED_DATA_DIRECTORY = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'data')
"""The pathname of the directory with the CSV files bundled with `distro-lifecycle` (a string)."""

DATE_FORMAT = '%Y-%m-%d'
"""The format of the dates in the CSV files (a string)."""

CORE_COLUMNS = ('version', 'codename', 'series', 'created', 'release', 'eol')
"""The columns that every dataset starts with (a tuple of strings)."""

REQUIRED_FIELDS = 4
"""
The minimum number of fields on a data line (an integer).

The distro-info-data files omit trailing empty fields, so a series that
hasn't been released yet is described by only its version, code name, series
name and creation date.
"""

EXTENDED_COLUMNS = {
    'eol-elts': 'eol_esm',
    'eol-esm': 'eol_esm',
    'eol-lts': 'eol_lts',
    'eol-server': 'eol_lts',
}
"""
A dictionary that maps extended support columns to :class:`SeriesRecord` attributes.

Debian and Ubuntu use different names for comparable concepts:

- Debian LTS (``eol-lts``) and Ubuntu server support (``eol-server``) both
  end up in :attr:`SeriesRecord.eol_lts`.
- Debian Extended LTS (``eol-elts``) and Ubuntu ESM (``eol-esm``) both end
  up in :attr:`SeriesRecord.eol_esm`.

Extra columns that aren't listed here (like Ubuntu's ``eol-legacy``) are
preserved in :attr:`SeriesRecord.extra_dates`.
"""

DATE_PATTERN = re.compile(r'^\d{4}-\d{2}-\d{2}$')
"""Compiled regular expression that matches a zero padded ``YYYY-MM-DD`` date."""

VERSION_PATTERN = re.compile(r'^\d+(\.\d+)*$')
"""Compiled regular expression that matches a numeric version token like ``18.04``."""

# Public identifiers that require documentation.
__all__ = (
    'BUNDLED_DATA_DIRECTORY',
    'CORE_COLUMNS',
    'DATE_FORMAT',
    'DATE_PATTERN',
    'DISTRO_INFO_DIRECTORY',
    'DuplicateKeyError',
    'EXTENDED_COLUMNS',
    'LoadError',
    'MalformedError',
    'REQUIRED_FIELDS',
    'SeriesRecord',
    'dump',
    'find_data_file',
    'format_date',
    'load',
    'parse_csv_file',
    'parse_date',
    'parse_version',
)

# Initialize a logger.
logger = logging.getLogger(__name__)


def dump(records, columns):
    """
    Serialize series records in the format of the ``/usr/share/distro-info/*.csv`` files.

    :param records: An iterable of :class:`SeriesRecord` objects.
    :param columns: The column names to write (a sequence of strings that
                    starts with :data:`CORE_COLUMNS`).
    :returns: A list of strings (one line per string, the first line
              contains the column names).

    Trailing empty fields are omitted, just like distro-info-data does.
    """
    handle = io.StringIO()
    writer = csv.writer(handle, lineterminator='\n')
    writer.writerow(columns)
    for record in records:
        row = [record.version, record.codename, record.series]
        row.extend(format_date(record.get_date(name)) for name in columns[3:])
        while len(row) > REQUIRED_FIELDS and not row[-1]:
            row.pop()
        writer.writerow(row)
    return handle.getvalue().splitlines()


def find_data_file(distributor_id, directory=DISTRO_INFO_DIRECTORY):
    """
    Find the CSV file with release metadata for the given distributor.

    :param distributor_id: The name of the distributor (a string like
                           ``debian`` or ``ubuntu``).
    :param directory: The directory that is searched first (a string,
                      defaults to :data:`DISTRO_INFO_DIRECTORY`).
    :returns: The pathname of a CSV file (a string).
    :raises: :exc:`~exceptions.EnvironmentError` when no CSV file is available.

    The CSV files installed on the system are preferred over the bundled ones
    because those files may be more up-to-date than the bundled information.
    """
    filename = '%s.csv' % distributor_id.lower()
    pathname = os.path.join(directory, filename)
    if os.path.isfile(pathname):
        return pathname
    bundled = os.path.join(BUNDLED_DATA_DIRECTORY, filename)
    if os.path.isfile(bundled):
        logger.debug("No %s in %s, using bundled copy.", filename, directory)
        return bundled
    msg = "No release metadata available for %s! (%s doesn't exist)"
    raise EnvironmentError(msg % (distributor_id.capitalize(), pathname))


def format_date(value):
    """Convert a :class:`datetime.date` object (or :data:`None`) to a ``YYYY-MM-DD`` string."""
    return value.strftime(DATE_FORMAT) if value else ''


def load(lines, columns=None, distributor_id=None, source='<dataset>'):
    """
    Parse a dataset in the format of the ``/usr/share/distro-info/*.csv`` files.

    :param lines: An iterable of strings (the lines of the dataset).
    :param columns: The column names (a sequence of strings) or :data:`None`
                    when the first line of the dataset contains the column
                    names (this is the default).
    :param distributor_id: The distributor ID to record in each
                           :class:`SeriesRecord` (a string or :data:`None`).
    :param source: A description of the dataset used in log and error
                   messages (a string, usually a filename).
    :returns: A list of :class:`SeriesRecord` objects in dataset order.
    :raises: :exc:`MalformedError` when a line has the wrong number of
             fields or contains a value that can't be parsed,
             :exc:`DuplicateKeyError` when a series name, code name or
             version number is used more than once.

    The order of the records is the order of the lines in the dataset, which
    is expected to be chronological (oldest first). The dataset is parsed in
    full before anything is returned.
    """
    timer = Timer()
    reader = csv.reader(lines)
    if columns is None:
        columns = next(reader, None)
        if columns is None:
            logger.debug("Dataset %s is empty.", source)
            return []
    columns = check_columns(columns, source)
    records = []
    seen = dict(codename={}, series={}, version={})
    for fields in reader:
        if not fields:
            continue
        record = parse_record(fields, columns, source, reader.line_num)
        record.distributor_id = distributor_id
        record.position = len(records)
        # Code names are compared case insensitively, like DistroInfo.find_series() does.
        keys = dict(codename=record.codename.lower(), series=record.series, version=parse_version(record.version))
        for name, value in sorted(keys.items()):
            if value is None:
                continue
            if value in seen[name]:
                msg = "%s:%i: Duplicate %s %r (already used on line %i)!"
                raise DuplicateKeyError(msg % (
                    source, reader.line_num, name,
                    getattr(record, name), seen[name][value],
                ))
            seen[name][value] = reader.line_num
        records.append(record)
    logger.debug("Loaded %s from %s in %s.", pluralize(len(records), "series", "series"), source, timer)
    return records


def check_columns(columns, source):
    """Validate the column names of a dataset and return them as a tuple."""
    columns = tuple(columns)
    if columns[:len(CORE_COLUMNS)] != CORE_COLUMNS:
        msg = "%s: The dataset should start with the columns %s! (got %s)"
        raise MalformedError(msg % (source, ','.join(CORE_COLUMNS), ','.join(columns)))
    if len(set(columns)) != len(columns):
        msg = "%s: The dataset contains duplicate column names! (%s)"
        raise MalformedError(msg % (source, ','.join(columns)))
    attributes = [EXTENDED_COLUMNS[name] for name in columns if name in EXTENDED_COLUMNS]
    if len(set(attributes)) != len(attributes):
        msg = "%s: The dataset contains conflicting extended support columns! (%s)"
        raise MalformedError(msg % (source, ','.join(columns)))
    return columns


def parse_csv_file(filename, distributor_id=None):
    """
    Parse a CSV file in the format of the ``/usr/share/distro-info/*.csv`` files.

    :param filename: The pathname of the CSV file (a string).
    :param distributor_id: The distributor ID (a string, defaults to the
                           basename of the file without its extension).
    :returns: A list of :class:`SeriesRecord` objects (see :func:`load()`).
    """
    if not distributor_id:
        basename, extension = os.path.splitext(os.path.basename(filename))
        distributor_id = basename.lower()
    with open(filename, newline='', encoding='UTF-8') as handle:
        return load(handle, distributor_id=distributor_id, source=filename)


def parse_date(value):
    """
    Convert a ``YYYY-MM-DD`` string to a :class:`datetime.date` object.

    :param value: A date string or an empty string.
    :returns: A :class:`datetime.date` object or :data:`None` (when `value` is empty).
    :raises: :exc:`~exceptions.ValueError` when `value` isn't a valid, zero
             padded ``YYYY-MM-DD`` date (:func:`~datetime.datetime.strptime()`
             on its own also accepts ``2020-1-1``).
    """
    if not value:
        return None
    if not DATE_PATTERN.match(value):
        msg = "Failed to parse date! (%r, expected YYYY-MM-DD)"
        raise ValueError(msg % value)
    return datetime.datetime.strptime(value, DATE_FORMAT).date()


def parse_record(fields, columns, source, line_number):
    """Convert the fields of a single data line to a :class:`SeriesRecord` object."""
    if not (REQUIRED_FIELDS <= len(fields) <= len(columns)):
        msg = "%s:%i: Expected between %i and %i fields but got %i!"
        raise MalformedError(msg % (source, line_number, REQUIRED_FIELDS, len(columns), len(fields)))
    values = dict(zip(columns, fields))
    for name in ('codename', 'series', 'created'):
        if not values[name]:
            msg = "%s:%i: The %s field is empty!"
            raise MalformedError(msg % (source, line_number, name))
    try:
        parse_version(values['version'])
        record = SeriesRecord(
            codename=values['codename'],
            created=parse_date(values['created']),
            eol=parse_date(values.get('eol')),
            release=parse_date(values.get('release')),
            series=values['series'],
            version=values['version'],
        )
        for name in columns[len(CORE_COLUMNS):]:
            value = parse_date(values.get(name))
            if name in EXTENDED_COLUMNS:
                setattr(record, EXTENDED_COLUMNS[name], value)
            else:
                record.extra_dates[name] = value
    except ValueError as e:
        raise MalformedError("%s:%i: %s" % (source, line_number, e))
    return record


def parse_version(value):
    """
    Convert a version string to a tuple of integers.

    :param value: A version string like ``10``, ``9.10`` or ``18.04 LTS``.
    :returns: A tuple of integers like ``(18, 4)`` or :data:`None` when the
              version string is empty.
    :raises: :exc:`~exceptions.ValueError` when a nonempty version string
             doesn't contain a numeric token.

    Comparing the resulting tuples gives numeric ordering, so ``9.10`` sorts
    before ``10.04`` (which isn't true for the strings).
    """
    if not value:
        return None
    for token in value.split():
        if VERSION_PATTERN.match(token):
            return tuple(int(c) for c in token.split('.'))
    msg = "Failed to convert version string to number! (%r)"
    raise ValueError(msg % value)


class LoadError(Exception):

    """Base class for exceptions raised when a dataset can't be loaded."""


class MalformedError(LoadError):

    """Raised by :func:`load()` when a line or value in the dataset can't be parsed."""


class DuplicateKeyError(LoadError):

    """Raised by :func:`load()` when two records share a series name, code name or version."""


class SeriesRecord(PropertyManager):

    """Data class for the lifecycle metadata of a single Debian or Ubuntu series."""

    @key_property
    def codename(self):
        """The long version of :attr:`series` (a string like ``Bionic Beaver``)."""

    @required_property
    def created(self):
        """The date on which the series was created (a :class:`~datetime.date` object)."""

    @writable_property
    def distributor_id(self):
        """The name of the distributor (a string like ``debian`` or ``ubuntu``) or :data:`None`."""

    @writable_property
    def eol(self):
        """The date on which standard support ends (a :class:`~datetime.date` object or :data:`None`)."""

    @writable_property
    def eol_esm(self):
        """
        The date on which extended support ends (a :class:`~datetime.date` object or :data:`None`).

        This is Ubuntu's Expanded Security Maintenance or Debian's Extended
        LTS, refer to :data:`EXTENDED_COLUMNS` for details.
        """

    @writable_property
    def eol_lts(self):
        """
        The date on which long term support ends (a :class:`~datetime.date` object or :data:`None`).

        This is Ubuntu's server support or Debian LTS, refer to
        :data:`EXTENDED_COLUMNS` for details.
        """

    @mutable_property(cached=True)
    def extra_dates(self):
        """An ordered dictionary with dates from columns not covered by :data:`EXTENDED_COLUMNS`."""
        return collections.OrderedDict()

    @lazy_property
    def full_name(self):
        """
        The human friendly name of the series (a string).

        The result will be something like this:

        - Debian 12 "Bookworm"
        - Ubuntu 18.04 LTS "Bionic Beaver"
        """
        label = []
        if self.distributor_id:
            label.append(self.distributor_id.capitalize())
        if self.version:
            label.append(self.version)
        label.append('"%s"' % self.codename)
        return " ".join(label)

    @lazy_property
    def is_lts(self):
        """:data:`True` if the version string marks this series as long term support, :data:`False` otherwise."""
        return 'LTS' in self.version.split()

    @writable_property
    def position(self):
        """The zero based index of the record in its dataset (an integer or :data:`None`)."""

    @writable_property
    def release(self):
        """The date on which the series was released (a :class:`~datetime.date` object or :data:`None`)."""

    @key_property
    def series(self):
        """The short version of :attr:`codename` (a string like ``bionic``)."""

    @lazy_property
    def sort_key(self):
        """
        A tuple that defines the total order of series records.

        Numbered series are ordered by :func:`parse_version()`. Series without
        a version number (like Debian's ``sid`` and ``experimental``) sort
        after all numbered series, amongst themselves by :attr:`position`.
        """
        number = parse_version(self.version)
        if number is not None:
            return (0, number)
        return (1, self.position or 0)

    @mutable_property
    def version(self):
        """The version string (a string like ``12`` or ``18.04 LTS``, empty for unnumbered series)."""
        return ''

    def get_date(self, column):
        """
        Get the date stored in a dataset column.

        :param column: The name of a column like ``release`` or ``eol-esm``.
        :returns: A :class:`~datetime.date` object or :data:`None`.
        :raises: :exc:`~exceptions.ValueError` when the column is unknown.
        """
        if column in ('created', 'release', 'eol'):
            return getattr(self, column)
        if column in EXTENDED_COLUMNS:
            return getattr(self, EXTENDED_COLUMNS[column])
        if column in self.extra_dates:
            return self.extra_dates[column]
        msg = "Unknown date column! (%r)"
        raise ValueError(msg % column)

    def __str__(self):
        """
        Render a human friendly representation of a :class:`SeriesRecord` object.

        The result will be something like this:

        - Debian 9 (stretch)
        - Ubuntu 18.04 LTS (bionic)
        """
        label = []
        if self.distributor_id:
            label.append(self.distributor_id.capitalize())
        if self.version:
            label.append(self.version)
        label.append("(%s)" % self.series)
        return " ".join(label)
