"""
CSV Export

Serializes places into the four-column CSV and hands it to a file sink.

Rows are joined by hand rather than through the csv module: the address
is always wrapped in double quotes and no other field is quoted or
escaped, so names or phones containing commas or quotes shift columns.
"""

import logging
import os
from abc import ABC, abstractmethod
from typing import Iterable, Optional

from .config import CSV_FILENAME, CSV_HEADER, MISSING_VALUE
from .models import Place

logger = logging.getLogger(__name__)


class FileSink(ABC):
    """Destination for exported files."""

    @abstractmethod
    def deliver(self, data: bytes, filename: str) -> None:
        """Save data under the suggested filename."""


class DirectorySink(FileSink):
    """Writes delivered files into a local directory."""

    def __init__(self, directory: str = "output"):
        self.directory = directory
        self.last_path: Optional[str] = None

    def deliver(self, data: bytes, filename: str) -> None:
        os.makedirs(self.directory, exist_ok=True)
        path = os.path.join(self.directory, filename)
        with open(path, 'wb') as f:
            f.write(data)
        self.last_path = path
        logger.info("Wrote %d bytes to %s", len(data), path)


def format_rating(rating: Optional[float]) -> str:
    """Decimal string of a rating, without a trailing .0 for whole numbers."""
    if rating is None:
        return MISSING_VALUE
    if float(rating).is_integer():
        return str(int(rating))
    return str(rating)


def format_row(place: Place) -> str:
    return ','.join([
        place.name,
        f'"{place.vicinity}"',
        format_rating(place.rating),
        place.phone or MISSING_VALUE,
    ])


class CsvExporter:
    """Builds places.csv content."""

    def __init__(self, filename: str = CSV_FILENAME, encoding: str = 'utf-8'):
        self.filename = filename
        self.encoding = encoding

    def render(self, places: Iterable[Place]) -> str:
        lines = [','.join(CSV_HEADER)]
        lines.extend(format_row(place) for place in places)
        return '\n'.join(lines)

    def export(self, places: Iterable[Place]) -> bytes:
        """
        Serialize places to CSV bytes.

        An empty input still yields the header line.
        """
        return self.render(places).encode(self.encoding)

    def deliver(self, data: bytes, sink: FileSink) -> None:
        sink.deliver(data, self.filename)
