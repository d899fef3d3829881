"""
In-memory NAPPI catalog with a product name index.

The whole NAPPI file is parsed into a list of records and a keyword index is
built over the lower-cased product names. Both are published together as one
immutable CatalogSnapshot; searches always resolve index positions against
the snapshot that produced them.
"""

import threading
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence, Tuple, Union
import logging

from .errors import CatalogNotLoadedError, SourceUnavailableError
from .locks import ReadWriteLock
from .records import DEFAULT_ENCODING, Record, parse_fixed_width_line
from .search import find_matching_positions

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass(frozen=True)
class CatalogSnapshot:
    """One catalog generation and the index built from it."""
    records: Tuple[Record, ...]
    index: Mapping[str, Tuple[int, ...]]
    generation: int
    source: str
    loaded_at: datetime

    def __len__(self) -> int:
        return len(self.records)

    @property
    def distinct_names(self) -> int:
        return len(self.index)


def load_records(path: PathLike, encoding: str = DEFAULT_ENCODING) -> List[Record]:
    """
    Parse every line of a NAPPI file.

    Lines holding only whitespace are skipped. Any other line that is too
    short aborts the whole load; no partial list is ever returned.

    Raises:
        SourceUnavailableError: If the file cannot be opened or read.
        MalformedRecordError: On the first line that is too short.
    """
    path = Path(path)
    records: List[Record] = []

    try:
        with open(path, "rb") as f:
            for line_no, raw_line in enumerate(f, start=1):
                if not raw_line.strip():
                    continue
                records.append(parse_fixed_width_line(raw_line, line_no=line_no, encoding=encoding))
    except OSError as e:
        raise SourceUnavailableError(path, e.strerror or e) from e

    return records


def build_index(records: Sequence[Record]) -> Dict[str, List[int]]:
    """
    Map each lower-cased product name to the positions of the records holding it.

    Names are not split into words; the key is the full name. Position lists
    are in ascending order.
    """
    index: Dict[str, List[int]] = {}
    for position, record in enumerate(records):
        index.setdefault(record.name.lower(), []).append(position)
    return index


class NappiCatalog:
    """
    Owns the live CatalogSnapshot and serves searches against it.

    Searches share a read lock. A load parses and indexes without holding it,
    then swaps in the new snapshot under the write lock. If the load fails
    the previous snapshot stays in place.
    """

    def __init__(self, data_file: PathLike, encoding: str = DEFAULT_ENCODING):
        """
        Args:
            data_file: Path to the fixed-width NAPPI file.
            encoding: Text encoding of the file.
        """
        self.data_file = Path(data_file)
        self.encoding = encoding
        self.load_time: Optional[float] = None
        self._snapshot: Optional[CatalogSnapshot] = None
        self._lock = ReadWriteLock()
        # Only one load may parse and publish at a time.
        self._load_lock = threading.Lock()

    @property
    def loaded(self) -> bool:
        with self._lock.read_locked():
            return self._snapshot is not None

    @property
    def size(self) -> int:
        with self._lock.read_locked():
            return len(self._snapshot) if self._snapshot is not None else 0

    def snapshot(self) -> Optional[CatalogSnapshot]:
        """The currently published snapshot, or None before the first load."""
        with self._lock.read_locked():
            return self._snapshot

    def load(self, source: Optional[PathLike] = None) -> CatalogSnapshot:
        """
        Load the NAPPI file, index it and publish the result.

        Args:
            source: File to load instead of data_file. On success it becomes
                the new data_file.

        Returns:
            The newly published snapshot.

        Raises:
            SourceUnavailableError: If the file cannot be read.
            MalformedRecordError: If any line is too short.
        """
        path = Path(source) if source is not None else self.data_file

        with self._load_lock:
            logger.info(f"Loading NAPPI data from {path}...")
            start_time = time.time()
            try:
                records = load_records(path, self.encoding)
            except Exception as e:
                logger.error(f"Failed to load NAPPI file {path}: {e}")
                raise
            parse_time = time.time() - start_time
            logger.info(f"Loaded {len(records):,} entries in {parse_time:.3f} seconds")

            index_start = time.time()
            index = build_index(records)
            logger.info(
                f"Built product name index with {len(index):,} names "
                f"in {time.time() - index_start:.3f} seconds"
            )

            frozen_index = MappingProxyType(
                {name: tuple(positions) for name, positions in index.items()}
            )

            with self._lock.write_locked():
                previous = self._snapshot
                snapshot = CatalogSnapshot(
                    records=tuple(records),
                    index=frozen_index,
                    generation=previous.generation + 1 if previous else 1,
                    source=str(path),
                    loaded_at=datetime.now(timezone.utc),
                )
                self._snapshot = snapshot
                self.data_file = path
                self.load_time = time.time() - start_time

            logger.info(f"Published catalog generation {snapshot.generation}")
            return snapshot

    def search(self, query: str) -> List[Record]:
        """
        Return every record whose product name contains all keywords of the query.

        Raises:
            CatalogNotLoadedError: If no catalog has been loaded yet.
        """
        start_time = time.time()
        with self._lock.read_locked():
            snapshot = self._snapshot
            if snapshot is None:
                raise CatalogNotLoadedError("NAPPI catalog not loaded. Call load() first.")
            positions = find_matching_positions(snapshot.index, query)
            results = [snapshot.records[position] for position in positions]

        logger.debug(
            f"Query {query!r} matched {len(results)} entries "
            f"in {(time.time() - start_time) * 1000:.2f} ms"
        )
        return results

    def get_stats(self) -> dict:
        """
        Get statistics about the catalog.

        Returns:
            Dictionary with stats
        """
        snapshot = self.snapshot()
        return {
            "loaded": snapshot is not None,
            "generation": snapshot.generation if snapshot else 0,
            "total_entries": len(snapshot) if snapshot else 0,
            "distinct_names": snapshot.distinct_names if snapshot else 0,
            "loaded_at": snapshot.loaded_at.isoformat() if snapshot else None,
            "load_time_seconds": self.load_time,
            "data_file": str(self.data_file),
            "file_exists": self.data_file.exists(),
        }
