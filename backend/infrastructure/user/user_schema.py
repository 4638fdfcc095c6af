"""User document schema for the users collection.

Defines the persisted field list and the uniqueness constraint explicitly,
plus the mapping between documents and User entities.

Document shape::

    {
        "_id": ObjectId,
        "google": {"id": str, "name": str, "email": str},
        "created": datetime,
    }
"""

import logging
from datetime import datetime
from typing import Any, Dict

from motor.motor_asyncio import AsyncIOMotorDatabase

from domain.user.core.entities.user import User
from domain.user.core.value_objects.identity_profile import IdentityProfile
from domain.user.core.value_objects.user_id import UserId

logger = logging.getLogger(__name__)

USERS_COLLECTION = "users"

USER_FIELDS = ("google.id", "google.name", "google.email", "created")

# (field, index name) pairs; enforced by the store atomically
UNIQUE_FIELDS = (("google.email", "idx_google_email_unique"),)


def to_document(profile: IdentityProfile, created: datetime) -> Dict[str, Any]:
    """Build a new user document (without ``_id``)."""
    return {
        "google": {
            "id": profile.provider_id,
            "name": profile.name,
            "email": profile.email,
        },
        "created": created,
    }


def from_document(document: Dict[str, Any]) -> User:
    """Convert a stored document (``_id`` as str) to a User entity.

    Raises:
        KeyError: If a required field is missing
    """
    google = document["google"]
    return User(
        user_id=UserId(str(document["_id"])),
        identity=IdentityProfile(
            provider_id=google["id"],
            name=google["name"],
            email=google["email"],
        ),
        created_at=document["created"],
    )


async def register_user_schema(database: AsyncIOMotorDatabase) -> None:
    """Create the users collection indexes.

    Indexes:
    - google.email: Unique index (one user per email)
    - created: Index for sorting/filtering
    """
    collection = database[USERS_COLLECTION]

    for field_name, index_name in UNIQUE_FIELDS:
        await collection.create_index(field_name, unique=True, name=index_name)
        logger.info(f"Ensured unique index {index_name} on {USERS_COLLECTION}.{field_name}")

    await collection.create_index("created", name="idx_created")
