# Release lifecycle queries for Debian and Ubuntu series.
#
# Last Change: October 16, 2026

"""Distribution specific knowledge, one module per distributor ID."""
