"""Domain exception hierarchy.

The classification engine itself is total over strings and never raises
for unrecognised names.  These exceptions belong to the seams around it:
rule-table construction, batch intake and asset acquisition.  The
interface layer translates each one to an HTTP status code.
"""

from __future__ import annotations


class AssetClassifierError(Exception):
    """Base exception for the entire application."""


# ── Configuration ───────────────────────────────────────────────────────────


class RuleTableError(AssetClassifierError):
    """A pattern rule table is malformed (bad label or uncompilable pattern)."""


# ── Batch intake ────────────────────────────────────────────────────────────


class EmptyBatchError(AssetClassifierError):
    """An import batch contained no asset names."""


class BatchTooLargeError(AssetClassifierError):
    """An import batch exceeds the configured maximum size."""


# ── Asset acquisition ───────────────────────────────────────────────────────


class AssetSourceError(AssetClassifierError):
    """The asset-name source could not be read."""
