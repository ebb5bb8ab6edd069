"""Base repository with common document CRUD operations."""

import functools
import logging
from collections.abc import Awaitable, Callable
from datetime import datetime, timezone
from typing import Any, ParamSpec, TypeVar

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import DESCENDING, ReturnDocument
from pymongo.errors import PyMongoError

from portfolio_api.errors.exceptions import InvalidInputError, StoreError

logger = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")


def parse_object_id(value: str) -> ObjectId:
    """Translate a 24-char hex string into an ObjectId or raise InvalidInputError."""
    # ObjectId() also accepts 12-byte strings; only the hex form is a valid URL id
    if not isinstance(value, str) or len(value) != 24:
        raise InvalidInputError("invalid id")
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        raise InvalidInputError("invalid id") from None


def store_call(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
    """Wrap driver errors raised by a repository method in StoreError."""

    @functools.wraps(func)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return await func(*args, **kwargs)
        except PyMongoError as exc:
            logger.error(
                "store_operation_failed: %s",
                exc,
                extra={"operation": func.__name__, "cause": str(exc)},
            )
            raise StoreError() from exc

    return wrapper


def utcnow() -> datetime:
    """Current UTC time at the millisecond precision BSON dates store."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


class BaseRepository:
    """Generic async repository over a single document collection."""

    def __init__(self, collection):
        self.collection = collection

    @store_call
    async def insert(self, document: dict[str, Any]) -> dict[str, Any]:
        """Stamp timestamps, insert and return the stored document."""
        now = utcnow()
        doc = {**document, "createdAt": now, "updatedAt": now}
        result = await self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return doc

    @store_call
    async def find_all(self, sort_field: str = "createdAt") -> list[dict[str, Any]]:
        """Return every document, newest first by ``sort_field`` (ties: newest ``_id`` first)."""
        cursor = self.collection.find().sort([(sort_field, DESCENDING), ("_id", DESCENDING)])
        return await cursor.to_list(length=None)

    @store_call
    async def find_by_id(self, object_id: ObjectId) -> dict[str, Any] | None:
        return await self.collection.find_one({"_id": object_id})

    @store_call
    async def replace_fields(
        self,
        object_id: ObjectId,
        fields: dict[str, Any],
        unset: list[str] | None = None,
    ) -> dict[str, Any] | None:
        """Set ``fields`` (and drop ``unset``) in one call; return the updated document."""
        update: dict[str, Any] = {"$set": {**fields, "updatedAt": utcnow()}}
        if unset:
            update["$unset"] = {name: "" for name in unset}
        return await self.collection.find_one_and_update(
            {"_id": object_id},
            update,
            return_document=ReturnDocument.AFTER,
        )

    @store_call
    async def delete_by_id(self, object_id: ObjectId) -> bool:
        deleted = await self.collection.find_one_and_delete({"_id": object_id})
        return deleted is not None

    @store_call
    async def ping(self) -> None:
        """Round-trip to the server hosting the collection."""
        await self.collection.database.command("ping")
