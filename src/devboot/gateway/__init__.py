"""Gateways wrapping the external tools devboot shells out to.

Each sub-package provides an ABC plus real and fake implementations. Gateways
with mutating operations also provide dry-run and printing wrappers.
"""
