"""Datastream sources: where validators get their bytes from."""

import glob
from collections.abc import Mapping
from pathlib import Path
from typing import Protocol, runtime_checkable

from datastream_validator.utils.exceptions import DatastreamNotFoundError

_PATH_SEPARATORS = ("/", "\\")


@runtime_checkable
class DatastreamSource(Protocol):
    """Supplies raw datastream content by DSID."""

    def get_content(self, dsid: str) -> bytes:
        """Return the datastream bytes.

        Raises:
            DatastreamNotFoundError: If the object has no such datastream.
        """
        ...


class InMemoryDatastreamSource:
    """Datastreams held in a mapping of DSID -> bytes."""

    def __init__(self, datastreams: Mapping[str, bytes]) -> None:
        self._datastreams = dict(datastreams)

    def get_content(self, dsid: str) -> bytes:
        try:
            return self._datastreams[dsid]
        except KeyError:
            raise DatastreamNotFoundError(dsid) from None


class DirectoryDatastreamSource:
    """Datastreams stored as files in a directory, named after their DSID.

    ``OBJ``, ``OBJ.tif`` and ``OBJ.bin`` all resolve DSID ``OBJ``; an exact
    name match wins over a name with an extension. DSIDs containing path
    separators are treated as missing, and glob metacharacters in a DSID
    match literally.
    """

    def __init__(self, directory: str | Path) -> None:
        self.directory = Path(directory)

    def _resolve(self, dsid: str) -> Path | None:
        exact = self.directory / dsid
        if exact.is_file():
            return exact
        candidates = sorted(p for p in self.directory.glob(f"{glob.escape(dsid)}.*") if p.is_file())
        return candidates[0] if candidates else None

    def get_content(self, dsid: str) -> bytes:
        # DSIDs name files inside the directory, never paths
        if not dsid or dsid in (".", "..") or any(sep in dsid for sep in _PATH_SEPARATORS):
            raise DatastreamNotFoundError(dsid)
        path = self._resolve(dsid)
        if path is None:
            raise DatastreamNotFoundError(dsid)
        return path.read_bytes()
