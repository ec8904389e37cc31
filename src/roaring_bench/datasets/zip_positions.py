"""Loader for the "real-roaring-dataset" zip format.

Each archive entry holds one (possibly very long) line of comma-separated,
strictly ascending, non-negative integers. Ascending order is a precondition
of the format: it is neither checked nor restored here, and
``universe_size`` relies on the last value of each record being its maximum.
"""

import io
import logging
import zipfile
from collections.abc import Sequence
from pathlib import Path

from ..errors import DatasetNotFoundError, MalformedDataError

logger = logging.getLogger(__name__)

# Positions are unsigned 32-bit
MAX_POSITION = 0xFFFFFFFF


def _parse_line(line: str, *, dataset: str, entry: str) -> list[int]:
    line = line.strip()
    if not line:
        return []
    values: list[int] = []
    for token in line.split(","):
        digits = token.strip()
        # int() would also take signs, underscores and non-ASCII digits
        if not (digits.isascii() and digits.isdigit()):
            raise MalformedDataError(dataset, entry, token)
        value = int(digits)
        if value > MAX_POSITION:
            raise MalformedDataError(dataset, entry, token)
        values.append(value)
    return values


class ZipPositionsDataset:
    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    @property
    def name(self) -> str:
        return self.path.name

    def fetch_positions(self) -> list[list[int]]:
        """Read one position list per archive entry, in archive order.

        Raises:
            DatasetNotFoundError: The archive does not exist.
            MalformedDataError: A token is not an unsigned 32-bit integer, an entry is
                not UTF-8, or the archive is corrupt.
        """
        if not self.path.is_file():
            raise DatasetNotFoundError(str(self.path))

        positions: list[list[int]] = []
        try:
            with zipfile.ZipFile(self.path) as zf:
                for info in zf.infolist():
                    if info.is_dir():
                        continue
                    with zf.open(info) as raw:
                        reader = io.TextIOWrapper(raw, encoding="utf-8")
                        try:
                            line = reader.readline()
                        except UnicodeDecodeError as exc:
                            raise MalformedDataError(
                                self.name, info.filename, "<invalid utf-8>"
                            ) from exc
                    positions.append(_parse_line(line, dataset=self.name, entry=info.filename))
        except zipfile.BadZipFile as exc:
            raise MalformedDataError(self.name, "<archive>", str(exc)) from exc

        logger.info("Loaded %d records from %s", len(positions), self.name)
        return positions


def universe_size(positions: Sequence[Sequence[int]]) -> int:
    """Largest value across all records (last element of each sorted record)."""
    largest = 0
    for record in positions:
        if record and record[-1] > largest:
            largest = record[-1]
    return largest
