# Release lifecycle queries for Debian and Ubuntu series.
#
# Last Change: October 16, 2026

"""
Lifecycle knowledge specific to Ubuntu.

Ubuntu marks long term support releases in the version string (``18.04
LTS``) and tracks three support windows beyond the standard EOL date:

- ``eol-server``: the end of support for the server flavour of the older LTS
  releases (these dates end up in
  :attr:`~distro_lifecycle.releases.SeriesRecord.eol_lts`).
- ``eol-esm``: the end of `Expanded Security Maintenance`_ (these dates end up
  in :attr:`~distro_lifecycle.releases.SeriesRecord.eol_esm`).
- ``eol-legacy``: the end of the Legacy Support add-on (available through
  :attr:`~distro_lifecycle.releases.SeriesRecord.extra_dates`).

.. _Expanded Security Maintenance: https://ubuntu.com/security/esm
"""

COLUMNS = (
    'version', 'codename', 'series', 'created', 'release', 'eol',
    'eol-server', 'eol-esm', 'eol-legacy',
)
"""The columns of ``/usr/share/distro-info/ubuntu.csv`` (a tuple of strings)."""

PREDICATE_ALIASES = {
    'esm': 'extended',
}
"""A dictionary that maps Ubuntu specific predicate names to generic ones."""
