# Seeder/registry.py
"""
Known sample-data collections.

One ordered mapping drives everything: the default selection, the dispatch from
a fixture name to its MongoDB collection, the set wiped on reset and the rows
printed after import.
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from pymongo.client_session import ClientSession
from pymongo.database import Database


@dataclass(frozen=True)
class SeedCollection:
    name: str  # canonical name, also used on the command line
    collection: str  # MongoDB collection the records land in

    @property
    def fixture_file(self) -> str:
        return f"{self.name}.json"

    def insert(self, db: Database, docs: Sequence[Dict[str, Any]], session: Optional[ClientSession] = None) -> int:
        # insert_many rejects an empty list
        if not docs:
            return 0
        result = db[self.collection].insert_many(list(docs), session=session)
        return len(result.inserted_ids)

    def delete_all(self, db: Database, session: Optional[ClientSession] = None) -> int:
        return db[self.collection].delete_many({}, session=session).deleted_count

    def count(self, db: Database) -> int:
        return db[self.collection].count_documents({})


SAMPLE_COLLECTIONS: Dict[str, SeedCollection] = {
    entry.name: entry
    for entry in (
        SeedCollection("users", "users"),
        SeedCollection("organizations", "organizations"),
        SeedCollection("posts", "posts"),
        SeedCollection("events", "events"),
        SeedCollection("venue", "venues"),
        SeedCollection("recurrenceRules", "recurrencerules"),
        SeedCollection("appUserProfiles", "appuserprofiles"),
        SeedCollection("actionItemCategories", "actionitemcategories"),
        SeedCollection("agendaCategories", "agendacategories"),
    )
}

DEFAULT_COLLECTIONS: List[str] = list(SAMPLE_COLLECTIONS)


def get_collection(name: str) -> Optional[SeedCollection]:
    return SAMPLE_COLLECTIONS.get(name)
