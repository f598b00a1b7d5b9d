# Release lifecycle queries for Debian and Ubuntu series.
#
# Last Change: October 16, 2026

"""
Release lifecycle queries for Debian and Ubuntu series.

The main entry point for this module is the :class:`DistroInfo` class, so if
you don't know where to start that would be a good place :-). You can also
take a look at the source code of the :mod:`distro_lifecycle.cli` module for
an example that uses the :class:`DistroInfo` class.

The real work is done by two modules that don't depend on anything outside of
the data they're given:

- :mod:`distro_lifecycle.releases` parses the CSV files.
- :mod:`distro_lifecycle.status` evaluates lifecycle predicates against an
  explicit "as of" date.
"""

# Standard library modules.
import datetime
import logging
import os
import sys

# External dependencies.
from property_manager import PropertyManager, cached_property, mutable_property, required_property

# Modules included in our package.
from distro_lifecycle.releases import (
    CORE_COLUMNS,
    DISTRO_INFO_DIRECTORY,
    EXTENDED_COLUMNS,
    find_data_file,
    parse_csv_file,
    parse_version,
)
from distro_lifecycle.status import PREDICATES, NotFoundError, evaluate

# Semi-standard module versioning.
__version__ = '1.0'

DATA_DIRECTORY_VARIABLE = 'DISTRO_INFO_DIRECTORY'
"""The name of the environment variable that overrides :attr:`DistroInfo.data_directory` (a string)."""

# Initialize a logger for this module.
logger = logging.getLogger(__name__)


class DistroInfo(PropertyManager):

    """Python API for lifecycle queries about the series of a single distribution."""

    repr_properties = ('as_of', 'data_file', 'distributor_id')
    """
    Override the list of properties included in :func:`repr()` output (a tuple of strings).

    The :class:`~property_manager.PropertyManager` superclass defines a
    :class:`~property_manager.PropertyManager.__repr__()` method that includes
    the values of computed properties in its output. Rendering :attr:`records`
    would dump the whole dataset, so only these properties are included.
    """

    @mutable_property
    def as_of(self):
        """
        The date that queries are evaluated against (a :class:`~datetime.date` object).

        This defaults to the current date. It's the only place where the
        system clock is consulted: :mod:`distro_lifecycle.status` always
        receives an explicit date.
        """
        return datetime.date.today()

    @cached_property
    def backend(self):
        """
        The backend module whose name matches :attr:`distributor_id`.

        :raises: :exc:`~exceptions.EnvironmentError` when no matching backend
                 module is available.
        """
        logger.debug("Checking whether %s is supported ..", self.distributor_id.capitalize())
        module_path = "%s.backends.%s" % (__name__, self.distributor_id.lower())
        try:
            __import__(module_path)
        except ImportError:
            msg = "%s is unsupported! (only Debian and Ubuntu are supported)"
            raise EnvironmentError(msg % self.distributor_id.capitalize())
        else:
            return sys.modules[module_path]

    @mutable_property
    def data_directory(self):
        """
        The directory with the system's CSV files (a string).

        The value of the ``$DISTRO_INFO_DIRECTORY`` environment variable is
        used when set, otherwise :data:`~distro_lifecycle.releases.DISTRO_INFO_DIRECTORY`.
        """
        return os.environ.get(DATA_DIRECTORY_VARIABLE) or DISTRO_INFO_DIRECTORY

    @mutable_property
    def data_file(self):
        """
        The pathname of the CSV file with release metadata (a string).

        Defaults to the file found by :func:`~distro_lifecycle.releases.find_data_file()`.
        """
        return find_data_file(self.distributor_id, self.data_directory)

    @required_property
    def distributor_id(self):
        """The distributor ID (a lowercase string like 'debian' or 'ubuntu')."""

    @property
    def predicates(self):
        """The names of the predicates accepted by :func:`evaluate()` (a sorted list of strings)."""
        names = set(PREDICATES)
        names.update(getattr(self.backend, 'PREDICATE_ALIASES', {}))
        names.update(getattr(self.backend, 'SELECTORS', {}))
        return sorted(names)

    @cached_property
    def records(self):
        """
        The series of the distribution (a list of :class:`~distro_lifecycle.releases.SeriesRecord` objects).

        The records are loaded from :attr:`data_file` on first access and
        shared by all queries, so they should be treated as read-only.
        """
        logger.debug("Loading %s release metadata from %s ..", self.distributor_id.capitalize(), self.data_file)
        return parse_csv_file(self.data_file, distributor_id=self.distributor_id.lower())

    def alias(self, name, as_of=None):
        """
        Get the alias of a series (only meaningful for Debian).

        :param name: The name of a series (see :func:`find_series()`).
        :param as_of: The reference date (defaults to :attr:`as_of`).
        :returns: The alias of the series (a string).
        :raises: :exc:`~exceptions.ValueError` when the :attr:`backend`
                 doesn't know about aliases.
        """
        if not hasattr(self.backend, 'get_alias'):
            msg = "%s series don't have aliases!"
            raise ValueError(msg % self.distributor_id.capitalize())
        return self.backend.get_alias(self, name, as_of or self.as_of)

    def days_until(self, record, milestone, as_of=None):
        """
        Count the days between :attr:`as_of` and a milestone of a series.

        :param record: A :class:`~distro_lifecycle.releases.SeriesRecord` object.
        :param milestone: The name of a date column (a string like ``release``
                          or ``eol``, refer to ``backend.COLUMNS``).
        :param as_of: The reference date (defaults to :attr:`as_of`).
        :returns: The number of days (an integer, negative when the milestone
                  has passed) or :data:`None` when the date isn't known.
        :raises: :exc:`~exceptions.ValueError` when the milestone is unknown.
        """
        value = self.get_milestone(record, milestone)
        return (value - (as_of or self.as_of)).days if value else None

    def get_milestone(self, record, milestone):
        """
        Get the date of a milestone of a series.

        :param record: A :class:`~distro_lifecycle.releases.SeriesRecord` object.
        :param milestone: The name of a date column (a string like ``release``
                          or ``eol``, refer to ``backend.COLUMNS``).
        :returns: A :class:`~datetime.date` object or :data:`None` when the
                  date isn't known.
        :raises: :exc:`~exceptions.ValueError` when the milestone is unknown.

        Datasets don't need to contain every column that the :attr:`backend`
        knows about (for example a file passed to ``--file`` may contain only
        the :data:`~distro_lifecycle.releases.CORE_COLUMNS`), so a milestone
        without a column in the dataset is treated as an unknown date.
        """
        if milestone not in self.backend.COLUMNS[3:]:
            msg = "Unknown milestone! (%r, expected one of %s)"
            raise ValueError(msg % (milestone, ', '.join(self.backend.COLUMNS[3:])))
        if milestone in CORE_COLUMNS or milestone in EXTENDED_COLUMNS:
            return record.get_date(milestone)
        return record.extra_dates.get(milestone)

    def evaluate(self, predicate, as_of=None):
        """
        Select the series that match a lifecycle predicate.

        :param predicate: One of the strings in :attr:`predicates`.
        :param as_of: The reference date (defaults to :attr:`as_of`).
        :returns: A list of :class:`~distro_lifecycle.releases.SeriesRecord` objects.
        :raises: :exc:`~exceptions.ValueError` when the predicate isn't
                 supported for this distribution and
                 :exc:`~distro_lifecycle.status.NotFoundError` when a single
                 result predicate doesn't match anything.

        Predicates defined by the :attr:`backend` take precedence over the
        generic predicates in :func:`distro_lifecycle.status.evaluate()`.
        """
        as_of = as_of or self.as_of
        if predicate not in self.predicates:
            msg = "The %r predicate isn't supported for %s! (expected one of %s)"
            raise ValueError(msg % (predicate, self.distributor_id.capitalize(), ', '.join(self.predicates)))
        selectors = getattr(self.backend, 'SELECTORS', {})
        if predicate in selectors:
            logger.debug("Using %s specific %r selector ..", self.distributor_id.capitalize(), predicate)
            return selectors[predicate](self.records, as_of)
        aliases = getattr(self.backend, 'PREDICATE_ALIASES', {})
        return evaluate(self.records, aliases.get(predicate, predicate), as_of)

    def find_series(self, name):
        """
        Find a series by name or version.

        :param name: A series name (like ``bionic``), a code name (like
                     ``Bionic Beaver``, case insensitive) or a version
                     number (like ``18.04``).
        :returns: A :class:`~distro_lifecycle.releases.SeriesRecord` object.
        :raises: :exc:`~distro_lifecycle.status.NotFoundError` when no
                 series matches.
        """
        for record in self.records:
            if name == record.series or name.lower() == record.codename.lower():
                return record
        try:
            number = parse_version(name)
        except ValueError:
            number = None
        if number is not None:
            for record in self.records:
                if parse_version(record.version) == number:
                    return record
        msg = "Unknown %s series! (%r)"
        raise NotFoundError(msg % (self.distributor_id.capitalize(), name))
