"""Port: asset-name source — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class NamedAsset(Protocol):
    """Anything exposing the exported filename or path as ``name``."""

    name: str


class AssetNameSource(Protocol):
    """Abstract contract for acquiring a batch of asset names."""

    def list_names(self) -> list[str]:
        """Return the filenames/paths of one import batch, in a stable order."""
        ...
