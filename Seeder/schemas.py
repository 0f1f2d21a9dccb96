# Seeder/schemas.py
from pydantic import BaseModel, Field
from typing import Dict, List, Optional


class FixtureCount(BaseModel):
    file_name: str
    document_count: int = Field(..., ge=0)


class CollectionCount(BaseModel):
    name: str = Field(..., description="Canonical collection name, e.g. users")
    document_count: int = Field(..., ge=0)


class SeedReport(BaseModel):
    requested: List[str]
    fixtures: Optional[List[FixtureCount]] = None  # None when listing failed
    inserted: Dict[str, int] = Field(default_factory=dict)
    skipped: List[str] = Field(default_factory=list)
    counts: Optional[List[CollectionCount]] = None  # None when verification failed
    succeeded: bool = False
    error: Optional[str] = None
