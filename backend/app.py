"""medmod-api FastAPI application.

Run with: uvicorn app:create_app --factory
"""

from __future__ import annotations

# Standard library
import logging as _logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncIterator, Dict, Optional

# Third-party
from dotenv import load_dotenv
from fastapi import FastAPI
from motor.motor_asyncio import AsyncIOMotorClient

# Local application imports
from api.errors import register_error_handlers
from api.meshes import router as meshes_router
from api.users import router as users_router
from application.user.service import UserService
from infrastructure.config import (
    get_app_version,
    get_log_level,
    get_privileged_emails,
    get_repository_backend,
)
from infrastructure.mesh.mesh_schema import register_mesh_schema
from infrastructure.mesh.repository_factory import create_mesh_repository
from infrastructure.persistence.mongodb.client import create_mongo_client, get_database
from infrastructure.user.repository_factory import create_user_repository
from infrastructure.user.user_schema import register_user_schema
from infrastructure.user.verifier_factory import create_identity_verifier

_env_path = Path(__file__).parent / ".env"
if _env_path.exists():
    load_dotenv(_env_path)

# --- Basic logging configuration (minimal) ---
_LOG_LEVEL = get_log_level()
_logging.basicConfig(
    level=getattr(_logging, _LOG_LEVEL, _logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

logger = _logging.getLogger("startup")


def _uses_mongodb() -> bool:
    return "mongodb" in (
        get_repository_backend("USER_REPOSITORY"),
        get_repository_backend("MESH_REPOSITORY"),
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    client: Optional[AsyncIOMotorClient[Dict[str, Any]]] = app.state.mongo_client
    if client is not None:
        database = get_database(client)
        await register_user_schema(database)
        await register_mesh_schema(database)
        logger.info("MongoDB indexes registered")
    try:
        yield
    finally:
        if client is not None:
            client.close()
            logger.info("MongoDB client closed")


def create_app() -> FastAPI:
    """Build the application and wire its collaborators.

    The store connection, repositories and services are constructed here
    once and attached to ``app.state``; routes resolve them through
    dependencies.
    """
    mongo_client = create_mongo_client() if _uses_mongodb() else None
    database = get_database(mongo_client) if mongo_client is not None else None

    app = FastAPI(title="medmod-api", version=get_app_version(), lifespan=lifespan)
    app.state.mongo_client = mongo_client
    app.state.user_service = UserService(
        verifier=create_identity_verifier(),
        repository=create_user_repository(database),
    )
    app.state.mesh_repository = create_mesh_repository(database)
    app.state.privileged_emails = get_privileged_emails()

    register_error_handlers(app)
    app.include_router(users_router)
    app.include_router(meshes_router)

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok", "version": get_app_version()}

    logger.info(f"medmod-api {get_app_version()} configured")
    return app


def main() -> None:
    import uvicorn

    uvicorn.run("app:create_app", factory=True, host="0.0.0.0", port=8080)


if __name__ == "__main__":
    main()
