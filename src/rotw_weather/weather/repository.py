"""Persistence of weather records in MongoDB via motor."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pydantic import ValidationError
from pymongo import ASCENDING, DESCENDING, ReturnDocument

from ..exceptions import WeatherPersistenceError
from ..log_setup import child_logger
from .models import Village, WeatherRecord

# Matches documents whose special is absent or not a guaranteed one.
GUARANTEED_FILTER: dict[str, Any] = {"$not": {"$regex": "guaranteed", "$options": "i"}}

POSTED_OR_LEGACY: dict[str, Any] = {
    "$or": [
        {"postedToDiscord": True},
        {"postedToDiscord": {"$exists": False}},
    ]
}


class WeatherRepository(ABC):
    """Storage contract used by the weather service."""

    @abstractmethod
    async def find_for_period(
        self,
        village: Village,
        start: datetime,
        end: datetime,
        *,
        exclusive_end: bool = True,
        only_posted: bool = False,
    ) -> WeatherRecord | None:
        """Return the most recent record dated within the window."""

    @abstractmethod
    async def find_exact(self, village: Village, date: datetime) -> WeatherRecord | None:
        """Return the record stored under exactly ``(village, date)``."""

    @abstractmethod
    async def insert_if_absent(self, record: WeatherRecord) -> WeatherRecord:
        """Insert-only upsert on ``(village, date)``; returns whatever is stored."""

    @abstractmethod
    async def exists(self, record_id: Any) -> bool:
        """Check a record is durably stored."""

    @abstractmethod
    async def recent(
        self,
        village: Village,
        limit: int,
        *,
        before: datetime | None = None,
    ) -> list[WeatherRecord]:
        """Return up to ``limit`` records, most recent first."""

    @abstractmethod
    async def set_fields(self, record_id: Any, fields: dict[str, Any]) -> WeatherRecord | None:
        """Set fields on a record; ``None`` when it no longer exists."""

    @abstractmethod
    async def set_special_unless_guaranteed(
        self,
        record_id: Any,
        special: dict[str, Any],
        extra: dict[str, Any] | None = None,
    ) -> WeatherRecord | None:
        """Set ``special`` unless a guaranteed special is stored; ``None`` on conflict."""

    async def ensure_indexes(self) -> None:
        """Create any indexes the store needs."""

    async def close(self) -> None:
        """Release store resources."""


def _to_record(document: dict[str, Any] | None) -> WeatherRecord | None:
    if not document:
        return None
    if not document.get("village") or not document.get("date"):
        return None
    try:
        return WeatherRecord.model_validate(document)
    except ValidationError as exc:
        raise WeatherPersistenceError(
            f"Stored weather document {document.get('_id')!r} is malformed: {exc}"
        ) from exc


class MongoWeatherRepository(WeatherRepository):
    """Weather records in one MongoDB collection, one document per village and period."""

    def __init__(
        self,
        collection: AsyncIOMotorCollection,
        *,
        client: AsyncIOMotorClient | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.collection = collection
        self.client = client
        self.logger = logger or child_logger("weather.repository")

    @classmethod
    def from_settings(
        cls,
        settings: Any,
        *,
        logger: logging.Logger | None = None,
    ) -> MongoWeatherRepository:
        client = AsyncIOMotorClient(
            settings.mongodb_uri,
            tz_aware=True,
            serverSelectionTimeoutMS=settings.mongodb_timeout_ms,
        )
        collection = client[settings.mongodb_database][settings.weather_collection]
        return cls(collection, client=client, logger=logger)

    async def ensure_indexes(self) -> None:
        await self.collection.create_index(
            [("village", ASCENDING), ("date", ASCENDING)],
            unique=True,
            name="village_date_unique",
        )
        await self.collection.create_index(
            [("village", ASCENDING), ("date", DESCENDING)],
            name="village_date_recent",
        )

    async def close(self) -> None:
        if self.client is not None:
            self.client.close()

    async def find_for_period(
        self,
        village: Village,
        start: datetime,
        end: datetime,
        *,
        exclusive_end: bool = True,
        only_posted: bool = False,
    ) -> WeatherRecord | None:
        date_range = {"$gte": start, "$lt" if exclusive_end else "$lte": end}
        query: dict[str, Any] = {"village": village.value, "date": date_range}
        if only_posted:
            query = {"$and": [{"village": village.value}, {"date": date_range}, POSTED_OR_LEGACY]}

        document = await self.collection.find_one(query, sort=[("date", DESCENDING)])
        if document is None and only_posted:
            unposted = await self.collection.find_one(
                {"village": village.value, "date": date_range},
                sort=[("date", DESCENDING)],
            )
            if unposted is not None:
                self.logger.info(
                    "Weather for %s exists but is not posted (postedToDiscord=%s, id=%s).",
                    village.value,
                    unposted.get("postedToDiscord"),
                    unposted.get("_id"),
                )
        return _to_record(document)

    async def find_exact(self, village: Village, date: datetime) -> WeatherRecord | None:
        document = await self.collection.find_one({"village": village.value, "date": date})
        return _to_record(document)

    async def insert_if_absent(self, record: WeatherRecord) -> WeatherRecord:
        document = await self.collection.find_one_and_update(
            {"village": record.village.value, "date": record.date},
            {"$setOnInsert": record.to_document()},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        stored = _to_record(document)
        if stored is None or stored.id is None:
            raise WeatherPersistenceError(
                f"Weather save returned no _id for {record.village.value}."
            )
        return stored

    async def exists(self, record_id: Any) -> bool:
        count = await self.collection.count_documents({"_id": record_id}, limit=1)
        return count > 0

    async def recent(
        self,
        village: Village,
        limit: int,
        *,
        before: datetime | None = None,
    ) -> list[WeatherRecord]:
        query: dict[str, Any] = {"village": village.value}
        if before is not None:
            query["date"] = {"$lt": before}
        cursor = self.collection.find(query).sort("date", DESCENDING).limit(limit)
        documents = await cursor.to_list(length=limit)
        records = []
        for document in documents:
            record = _to_record(document)
            if record is not None:
                records.append(record)
        return records

    async def set_fields(self, record_id: Any, fields: dict[str, Any]) -> WeatherRecord | None:
        document = await self.collection.find_one_and_update(
            {"_id": record_id},
            {"$set": fields},
            return_document=ReturnDocument.AFTER,
        )
        return _to_record(document)

    async def set_special_unless_guaranteed(
        self,
        record_id: Any,
        special: dict[str, Any],
        extra: dict[str, Any] | None = None,
    ) -> WeatherRecord | None:
        fields = {"special": special, **(extra or {})}
        document = await self.collection.find_one_and_update(
            {
                "_id": record_id,
                "special.probability": GUARANTEED_FILTER,
            },
            {"$set": fields},
            return_document=ReturnDocument.AFTER,
        )
        return _to_record(document)
