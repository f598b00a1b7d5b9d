# Release lifecycle queries for Debian and Ubuntu series.
#
# Last Change: October 16, 2026

"""
Evaluation of lifecycle predicates against an explicit "as of" date.

The main entry point of this module is :func:`evaluate()` which selects the
series records that match a lifecycle predicate (see :data:`PREDICATES`) on
a given date. Every predicate is a closed form comparison against that date,
the system clock is never consulted, so answers for historical and future
dates are as reproducible as answers for today.

All date comparisons are inclusive: a series is released on its release date
and still supported on its EOL date.
"""

# Standard library modules.
import logging

# External dependencies.
from humanfriendly import pluralize

# Public identifiers that require documentation.
__all__ = (
    'DEVEL',
    'PREDICATES',
    'SINGLE_RESULT_PREDICATES',
    'SUPPORTED',
    'UNSUPPORTED',
    'ConsistencyError',
    'NotFoundError',
    'evaluate',
    'has_extended_support',
    'is_released',
    'is_supported',
    'is_unsupported',
    'is_upcoming',
    'lifecycle_phase',
    'select_greatest',
    'select_nearest',
)

DEVEL = 'devel'
"""The lifecycle phase of a series that hasn't been released yet (a string)."""

SUPPORTED = 'supported'
"""The lifecycle phase of a released series within standard support (a string)."""

UNSUPPORTED = 'unsupported'
"""The lifecycle phase of a released series past its standard EOL date (a string)."""

PREDICATES = ('all', 'devel', 'extended', 'latest', 'lts', 'stable', 'supported', 'unsupported')
"""The names of the predicates understood by :func:`evaluate()` (a tuple of strings)."""

SINGLE_RESULT_PREDICATES = ('devel', 'latest', 'stable')
"""The names of the predicates that select exactly one series (a tuple of strings)."""

# Initialize a logger for this module.
logger = logging.getLogger(__name__)


def evaluate(records, predicate, as_of):
    """
    Select the series records that match a lifecycle predicate.

    :param records: A sequence of :class:`~distro_lifecycle.releases.SeriesRecord`
                    objects in dataset (chronological) order. The records are
                    not modified.
    :param predicate: One of the strings in :data:`PREDICATES`.
    :param as_of: The reference date (a :class:`~datetime.date` object).
    :returns: A list of matching records in dataset order.
    :raises: The following exceptions can be raised:

             - :exc:`~exceptions.ValueError` when the predicate is unknown.
             - :exc:`NotFoundError` when one of the
               :data:`SINGLE_RESULT_PREDICATES` doesn't match any series.
             - :exc:`ConsistencyError` when two candidates for a single
               result share the same version.

    The supported predicates are:

    ``all``
      Every record, regardless of `as_of`.

    ``latest``
      The greatest version that has been released on `as_of`. When nothing
      has been released yet this falls back to the greatest version that has
      been created on `as_of`.

    ``devel``
      The nearest upcoming series, that is the series with the earliest
      release date after `as_of` or, when none of the unreleased series has a
      release date, the greatest unreleased version.

    ``stable``
      The greatest version that is within standard support on `as_of`.

    ``supported``
      All series that are within standard support on `as_of`.

    ``unsupported``
      All series that are past their standard EOL date on `as_of`.

    ``lts`` and ``extended``
      All series that are covered by long term support
      (:attr:`~distro_lifecycle.releases.SeriesRecord.eol_lts`) respectively
      extended support (:attr:`~distro_lifecycle.releases.SeriesRecord.eol_esm`)
      on `as_of`, refer to :func:`has_extended_support()` for details.
    """
    if predicate == 'all':
        result = list(records)
    elif predicate == 'latest':
        candidates = [r for r in records if is_released(r, as_of)]
        if not candidates:
            logger.debug("Nothing released on %s, falling back to created series ..", as_of)
            candidates = [r for r in records if r.created <= as_of]
        result = [select_greatest(candidates, predicate, as_of)]
    elif predicate == 'devel':
        result = [select_greatest(select_nearest(records, as_of), predicate, as_of)]
    elif predicate == 'stable':
        result = [select_greatest([r for r in records if is_supported(r, as_of)], predicate, as_of)]
    elif predicate == 'supported':
        result = [r for r in records if is_supported(r, as_of)]
    elif predicate == 'unsupported':
        result = [r for r in records if is_unsupported(r, as_of)]
    elif predicate == 'lts':
        result = [r for r in records if has_extended_support(r, as_of, r.eol_lts)]
    elif predicate == 'extended':
        result = [r for r in records if has_extended_support(r, as_of, r.eol_esm)]
    else:
        msg = "Unknown predicate! (%r, expected one of %s)"
        raise ValueError(msg % (predicate, ', '.join(PREDICATES)))
    logger.debug("Selected %s matching %r on %s.", pluralize(len(result), "series", "series"), predicate, as_of)
    return result


def has_extended_support(record, as_of, end_date):
    """
    Check whether a series is covered by long term or extended support.

    :param record: A :class:`~distro_lifecycle.releases.SeriesRecord` object.
    :param as_of: The reference date (a :class:`~datetime.date` object).
    :param end_date: The end of the extended support window
                     (a :class:`~datetime.date` object or :data:`None`).
    :returns: :data:`True` if the series has extended support on `as_of`,
              :data:`False` otherwise.

    For series flagged as long term support the window ends at `end_date`.
    When such a series doesn't have an `end_date` it is only covered for as
    long as it is within standard support.

    Other series only qualify once they are past their standard EOL date and
    only when they have an `end_date` that hasn't passed yet.
    """
    if not is_released(record, as_of):
        return False
    if record.is_lts:
        if end_date is None:
            return is_supported(record, as_of)
        return end_date >= as_of
    return (
        end_date is not None and end_date >= as_of
        and record.eol is not None and record.eol < as_of
    )


def is_released(record, as_of):
    """Check whether the series has a release date on or before `as_of`."""
    return record.release is not None and record.release <= as_of


def is_supported(record, as_of):
    """Check whether the series is released and hasn't passed its (known) EOL date on `as_of`."""
    return is_released(record, as_of) and (record.eol is None or record.eol >= as_of)


def is_unsupported(record, as_of):
    """Check whether the series is released and has a known EOL date before `as_of`."""
    return is_released(record, as_of) and record.eol is not None and record.eol < as_of


def is_upcoming(record, as_of):
    """Check whether the series doesn't have a release date or is released after `as_of`."""
    return record.release is None or record.release > as_of


def lifecycle_phase(record, as_of):
    """
    Get the lifecycle phase of a series.

    :param record: A :class:`~distro_lifecycle.releases.SeriesRecord` object.
    :param as_of: The reference date (a :class:`~datetime.date` object).
    :returns: One of the strings :data:`DEVEL`, :data:`SUPPORTED` or
              :data:`UNSUPPORTED`.

    For a given series the phase only ever moves forward as `as_of`
    increases: from :data:`DEVEL` to :data:`SUPPORTED` to :data:`UNSUPPORTED`.
    """
    if is_upcoming(record, as_of):
        return DEVEL
    elif is_unsupported(record, as_of):
        return UNSUPPORTED
    else:
        return SUPPORTED


def select_greatest(candidates, predicate, as_of):
    """
    Select the candidate with the greatest version.

    :param candidates: A list of :class:`~distro_lifecycle.releases.SeriesRecord` objects.
    :param predicate: The name of the predicate (a string, used in error messages).
    :param as_of: The reference date (a :class:`~datetime.date` object, used
                  in error messages).
    :returns: A :class:`~distro_lifecycle.releases.SeriesRecord` object.
    :raises: :exc:`NotFoundError` when there are no candidates,
             :exc:`ConsistencyError` when the greatest version is shared.
    """
    if not candidates:
        msg = "No %s series on %s!"
        raise NotFoundError(msg % (predicate, as_of))
    ranked = sorted(candidates, key=lambda r: r.sort_key)
    if len(ranked) > 1 and ranked[-1].sort_key == ranked[-2].sort_key:
        msg = "Unable to select %s series on %s because %s and %s share the same version!"
        raise ConsistencyError(msg % (predicate, as_of, ranked[-2], ranked[-1]))
    return ranked[-1]


def select_nearest(records, as_of):
    """
    Select the upcoming series that will be released first.

    :param records: A sequence of :class:`~distro_lifecycle.releases.SeriesRecord` objects.
    :param as_of: The reference date (a :class:`~datetime.date` object).
    :returns: A list of records that share the nearest release date (when
              any upcoming series has a release date) or all upcoming series
              without a release date.
    """
    upcoming = [r for r in records if is_upcoming(r, as_of)]
    scheduled = [r for r in upcoming if r.release is not None]
    if scheduled:
        nearest = min(r.release for r in scheduled)
        return [r for r in scheduled if r.release == nearest]
    return upcoming


class NotFoundError(LookupError):

    """Raised when a query that should produce a single series doesn't match anything."""


class ConsistencyError(Exception):

    """Raised when two series can't be ordered because they share the same version."""
