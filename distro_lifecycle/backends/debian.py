# Release lifecycle queries for Debian and Ubuntu series.
#
# Last Change: October 16, 2026

"""
Lifecycle knowledge specific to Debian.

Debian differs from Ubuntu in a couple of ways that matter when answering
lifecycle queries:

- Development happens in the unstable series ``sid`` which never gets a
  version number or release date, so :func:`select_devel()` replaces the
  generic "nearest upcoming series" rule.
- The next numbered release is prepared in ``testing`` and the previous
  stable release is known as ``oldstable``, refer to :func:`select_testing()`
  and :func:`select_oldstable()`.
- `Debian LTS`_ and `Extended LTS`_ are tracked in the ``eol-lts`` and
  ``eol-elts`` columns.

Here are references to some of the material that I've needed to consult while
working on this module:

- `Debian releases <https://www.debian.org/releases/>`_
- `The Debian wiki about LTS <https://wiki.debian.org/LTS>`_

.. _Debian LTS: https://wiki.debian.org/LTS
.. _Extended LTS: https://wiki.debian.org/LTS/Extended
"""

# Standard library modules.
import logging

# Modules included in our package.
from distro_lifecycle.status import NotFoundError, evaluate, is_released, select_greatest

COLUMNS = ('version', 'codename', 'series', 'created', 'release', 'eol', 'eol-lts', 'eol-elts')
"""The columns of ``/usr/share/distro-info/debian.csv`` (a tuple of strings)."""

UNSTABLE_SERIES = 'sid'
"""The name of the series that is permanently in development (a string)."""

EXPERIMENTAL_SERIES = 'experimental'
"""The name of the staging area for packages that aren't ready for unstable (a string)."""

RELATIVE_ALIASES = ('testing', 'stable', 'oldstable')
"""The aliases that move from series to series over time (a tuple of strings)."""

PREDICATE_ALIASES = {
    'elts': 'extended',
}
"""A dictionary that maps Debian specific predicate names to generic ones."""

# Initialize a logger for this module.
logger = logging.getLogger(__name__)


def get_alias(distro_info, name, as_of):
    """
    Get the alias of a Debian series on the given date.

    :param distro_info: The :class:`~distro_lifecycle.DistroInfo` object.
    :param name: The name of the series (a string like ``bookworm``).
    :param as_of: The reference date (a :class:`~datetime.date` object).
    :returns: One of the strings ``unstable``, ``experimental``, ``testing``,
              ``stable`` or ``oldstable`` when the series is known by one of
              those names on `as_of`, otherwise the series name.
    """
    record = distro_info.find_series(name)
    if record.series == UNSTABLE_SERIES:
        return 'unstable'
    if record.series == EXPERIMENTAL_SERIES:
        return EXPERIMENTAL_SERIES
    for alias in RELATIVE_ALIASES:
        try:
            if any(r.series == record.series for r in distro_info.evaluate(alias, as_of)):
                return alias
        except NotFoundError as e:
            logger.debug("Ignoring %s alias (%s).", alias, e)
    return record.series


def select_devel(records, as_of):
    """Select the unstable series (``sid``) once it has been created."""
    matches = [r for r in records if r.series == UNSTABLE_SERIES and r.created <= as_of]
    if not matches:
        msg = "No devel series on %s!"
        raise NotFoundError(msg % as_of)
    return matches


def select_oldstable(records, as_of):
    """Select the released series that directly precedes the current stable series."""
    try:
        stable = evaluate(records, 'stable', as_of)[0]
    except NotFoundError:
        msg = "No oldstable series on %s! (there's no stable series yet)"
        raise NotFoundError(msg % as_of)
    candidates = [r for r in records if is_released(r, as_of) and r.sort_key < stable.sort_key]
    return [select_greatest(candidates, 'oldstable', as_of)]


def select_testing(records, as_of):
    """Select the nearest upcoming numbered series that has been created."""
    candidates = [r for r in records if r.version and r.created <= as_of]
    try:
        return evaluate(candidates, 'devel', as_of)
    except NotFoundError:
        msg = "No testing series on %s!"
        raise NotFoundError(msg % as_of)


SELECTORS = {
    'devel': select_devel,
    'oldstable': select_oldstable,
    'testing': select_testing,
}
"""A dictionary that maps Debian specific predicates to selector functions."""
