# Seeder/loader.py
"""
Reset, load and verification stages.

Assumes a single writer: nothing else may touch the target database while the
reset transaction runs.
"""
import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

from pymongo.database import Database
from pymongo.errors import PyMongoError

from .config import settings
from .fixtures import fixture_path, print_table, read_fixture
from .registry import SAMPLE_COLLECTIONS, get_collection
from .schemas import CollectionCount

logger = logging.getLogger(__name__)


def reset_database(db: Database) -> None:
    """Delete all documents from every known collection in one transaction."""

    def _delete_all(session):
        for entry in SAMPLE_COLLECTIONS.values():
            entry.delete_all(db, session=session)

    try:
        # session is ended on every exit path; an aborted transaction keeps nothing
        with db.client.start_session() as session:
            session.with_transaction(_delete_all)
    except PyMongoError as e:
        logger.error("Database reset failed: %s", e)
        raise

    print("Database reset completed.")


def insert_collections(
    db: Database,
    collections: Sequence[str],
    data_dir: Optional[Union[str, Path]] = None,
    skipped: Optional[List[str]] = None,
    inserted: Optional[Dict[str, int]] = None,
) -> Dict[str, int]:
    """
    Reset the database, then load each named collection from its fixture, in order.

    Unknown names are reported, appended to ``skipped`` and passed over. Any read,
    parse or insert failure propagates and stops the remaining loads; counts for
    collections already loaded stay in ``inserted``.
    Returns inserted document counts keyed by collection name.
    """
    data_dir = Path(data_dir or settings.SAMPLE_DATA_DIR)
    reset_database(db)

    if inserted is None:
        inserted = {}
    for name in collections:
        entry = get_collection(name)
        if entry is None:
            print(f"Invalid collection name: {name}")
            logger.warning("Skipping unknown collection %r", name)
            if skipped is not None:
                skipped.append(name)
            continue

        docs = read_fixture(fixture_path(data_dir, entry))
        inserted[name] = entry.insert(db, docs)
        logger.debug("Inserted %d documents into %s", inserted[name], entry.collection)
        print(f"Added {name} collection")

    return inserted


def check_count_after_import(db: Database) -> Optional[List[CollectionCount]]:
    """Print the document count of every known collection. Returns None on failure."""
    try:
        rows = [
            CollectionCount(name=name, document_count=entry.count(db))
            for name, entry in SAMPLE_COLLECTIONS.items()
        ]
    except PyMongoError as e:
        logger.error("Error checking document count: %s", e)
        return None

    print("\nDocument Counts After Import:\n")
    print_table("Collection Name", ((r.name, r.document_count) for r in rows))
    return rows
