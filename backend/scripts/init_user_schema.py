"""MongoDB schema initialization and indexes for users and meshes.

This script creates the indexes the service relies on, in particular the
unique index on ``google.email`` that enforces one user per email.

Run with: python -m scripts.init_user_schema
"""

import asyncio

from infrastructure.mesh.mesh_schema import MESHES_COLLECTION, register_mesh_schema
from infrastructure.persistence.mongodb.client import create_mongo_client, get_database
from infrastructure.user.user_schema import UNIQUE_FIELDS, USERS_COLLECTION, register_user_schema


async def create_indexes() -> None:
    """Create MongoDB indexes for users and meshes collections."""
    client = create_mongo_client()
    db = get_database(client)

    print(f"Creating indexes for {db.name}...")
    await register_user_schema(db)
    print(f"✓ Created indexes on {USERS_COLLECTION}")
    await register_mesh_schema(db)
    print(f"✓ Created indexes on {MESHES_COLLECTION}")

    client.close()


async def verify_schema() -> None:
    """Verify that the unique user indexes are present."""
    client = create_mongo_client()
    db = get_database(client)

    print("\nVerifying schema...")

    indexes = await db[USERS_COLLECTION].list_indexes().to_list(length=100)
    index_names = {idx["name"] for idx in indexes}

    required_indexes = {index_name for _, index_name in UNIQUE_FIELDS}

    missing = required_indexes - index_names
    if missing:
        print(f"⚠ Missing indexes: {missing}")
    else:
        print("✓ All required indexes present")

    print(f"\nAll indexes on {USERS_COLLECTION} collection:")
    for idx in indexes:
        print(f"  - {idx['name']}: {idx.get('key', {})} unique={idx.get('unique', False)}")

    client.close()


if __name__ == "__main__":
    print("=== medmod MongoDB Schema Initialization ===\n")
    asyncio.run(create_indexes())
    asyncio.run(verify_schema())
