from __future__ import annotations

from datetime import UTC, datetime

import strawberry
from bson import ObjectId

from ...logging import get_logger
from ..types.user import User
from . import get_database

logger = get_logger(__name__)

USERS_COLLECTION = "users"
MAX_PAGE_SIZE = 100


def _users(info: strawberry.Info):
    return get_database(info).collection(USERS_COLLECTION)


def _object_id(id: str) -> ObjectId | None:
    if not ObjectId.is_valid(id):
        return None
    return ObjectId(id)


async def resolve_users(info: strawberry.Info, limit: int, offset: int) -> list[User]:
    limit = max(1, min(limit, MAX_PAGE_SIZE))
    offset = max(0, offset)

    cursor = _users(info).find({}).sort("created_at", 1).skip(offset).limit(limit)
    documents = await cursor.to_list(length=limit)
    return [User.from_document(document) for document in documents]


async def resolve_user_by_id(info: strawberry.Info, id: str) -> User | None:
    object_id = _object_id(id)
    if object_id is None:
        return None

    document = await _users(info).find_one({"_id": object_id})
    if document is None:
        return None
    return User.from_document(document)


async def create_user(info: strawberry.Info, name: str, email: str) -> User:
    document = {
        "name": name,
        "email": email,
        "created_at": datetime.now(UTC),
    }
    result = await _users(info).insert_one(document)
    document["_id"] = result.inserted_id

    logger.info("User created", user_id=str(result.inserted_id))
    return User.from_document(document)


async def delete_user(info: strawberry.Info, id: str) -> bool:
    object_id = _object_id(id)
    if object_id is None:
        return False

    result = await _users(info).delete_one({"_id": object_id})
    deleted = result.deleted_count == 1
    if deleted:
        logger.info("User deleted", user_id=id)
    return deleted
