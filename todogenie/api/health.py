"""Health check endpoint."""

import logging
from datetime import UTC, datetime

from fastapi import APIRouter
from sqlalchemy.exc import SQLAlchemyError

from todogenie.api.dependencies import DbSession
from todogenie.config import get_settings
from todogenie.database import ping

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health")
def health_check(db: DbSession):
    """Report liveness and whether the database answers."""
    try:
        ping(db)
        database = "connected"
    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {e}")
        database = "disconnected"

    return {
        "status": "ok",
        "timestamp": datetime.now(UTC).isoformat(),
        "database": database,
        "environment": get_settings().environment,
    }
