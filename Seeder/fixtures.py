# Seeder/fixtures.py
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from bson import json_util
from bson.errors import BSONError

from .config import settings
from .registry import SeedCollection
from .schemas import FixtureCount

logger = logging.getLogger(__name__)


class FixtureError(ValueError):
    """Fixture content is valid JSON but not an array of objects, or holds bad Extended JSON."""


def print_table(label: str, rows: Iterable[Tuple[str, int]]) -> None:
    print(f"| {label}".ljust(30) + "| Document Count |")
    print("|".ljust(30, "-") + "|----------------|\n")
    for name, count in rows:
        print(f"| {name.ljust(28)}| {str(count).ljust(15)}|")


def fixture_path(directory: Union[str, Path], entry: SeedCollection) -> Path:
    return Path(directory) / entry.fixture_file


def load_json(path: Union[str, Path]) -> Any:
    # json_util decodes Extended JSON ({"$oid": ...}, {"$date": ...}) into BSON types
    with open(path, "r", encoding="utf-8") as f:
        raw = f.read()
    try:
        return json_util.loads(raw)
    except BSONError as e:
        raise FixtureError(f"{path}: {e}") from e


def read_fixture(path: Union[str, Path]) -> List[Dict[str, Any]]:
    """
    Read a fixture file and return its records.
    Raises OSError when unreadable, ValueError when malformed and FixtureError
    when the top level is not an array of objects.
    """
    docs = load_json(path)
    if not isinstance(docs, list):
        raise FixtureError(f"{path}: expected a JSON array, got {type(docs).__name__}")
    for i, doc in enumerate(docs):
        if not isinstance(doc, dict):
            raise FixtureError(f"{path}: record {i} is {type(doc).__name__}, expected an object")
    return docs


def count_fixture(path: Union[str, Path]) -> int:
    docs = load_json(path)
    if not isinstance(docs, list):
        raise FixtureError(f"{path}: expected a JSON array, got {type(docs).__name__}")
    return len(docs)


def list_sample_data(directory: Optional[Union[str, Path]] = None) -> Optional[List[FixtureCount]]:
    """
    Print every fixture file in ``directory`` with its document count.

    Informational only: any error aborts the listing, is logged and yields None.
    """
    directory = Path(directory or settings.SAMPLE_DATA_DIR)
    try:
        files = sorted(p for p in directory.iterdir() if p.is_file())
        rows = [FixtureCount(file_name=p.name, document_count=count_fixture(p)) for p in files]
    except (OSError, ValueError) as e:
        logger.error("Error listing sample data in %s: %s", directory, e)
        return None

    print("Sample Data Files:\n")
    print_table("File Name", ((r.file_name, r.document_count) for r in rows))
    print()
    return rows
