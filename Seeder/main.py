# Seeder/main.py
import argparse
import logging
from pathlib import Path
from typing import List, Optional, Sequence, Union

from bson.errors import BSONError
from pymongo import MongoClient
from pymongo.errors import PyMongoError

from .config import settings
from .db import connect, get_client
from .fixtures import list_sample_data
from .loader import check_count_after_import, insert_collections
from .logging_config import setup_logging
from .registry import DEFAULT_COLLECTIONS
from .schemas import SeedReport

logger = logging.getLogger(__name__)


def parse_items(raw: Optional[str]) -> List[str]:
    """Split a comma-separated --items value; empty or missing means every default collection."""
    items = [item.strip() for item in (raw or "").split(",") if item.strip()]
    return items or list(DEFAULT_COLLECTIONS)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Reset the database and load sample fixture data")
    parser.add_argument(
        "-i", "--items",
        help="Comma-separated list of collections to load sample data into",
    )
    parser.add_argument("-d", "--db-name", default=settings.DB_NAME, help="Target database name")
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=settings.SAMPLE_DATA_DIR,
        help="Directory holding the <collection>.json fixtures",
    )
    return parser.parse_args(argv)


def run(
    collections: Sequence[str],
    db_name: Optional[str] = None,
    data_dir: Optional[Union[str, Path]] = None,
    client: Optional[MongoClient] = None,
) -> SeedReport:
    """List fixtures, reset and load ``collections``, then report final counts."""
    data_dir = Path(data_dir or settings.SAMPLE_DATA_DIR)
    report = SeedReport(requested=list(collections))
    report.fixtures = list_sample_data(data_dir)

    owned = None
    db = None
    try:
        try:
            if client is None:
                client = owned = get_client()
            db = connect(db_name, client)
            insert_collections(db, collections, data_dir, skipped=report.skipped, inserted=report.inserted)
            report.succeeded = True
        # BSONError and OverflowError come from encoding documents at insert time
        except (OSError, ValueError, OverflowError, BSONError, PyMongoError) as e:
            logger.error("Error adding collections: %s", e)
            report.error = str(e)

        if db is not None:
            report.counts = check_count_after_import(db)
    finally:
        if owned is not None:
            owned.close()

    if report.succeeded:
        print("\nCollections added successfully")
    return report


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point. Returns 0 when reset and load succeeded, 1 otherwise."""
    args = parse_args(argv)
    setup_logging()
    report = run(parse_items(args.items), db_name=args.db_name, data_dir=args.data_dir)
    return 0 if report.succeeded else 1
