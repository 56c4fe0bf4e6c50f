"""Full database reseed."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError

from homeharbor.core.logging_config import get_logger
from homeharbor.core.models.io.common import MessageResponse

from ...services.deps import SessionDep
from ...services.seed import seed_database

logger = get_logger(__name__)

router = APIRouter(tags=["seed"])


@router.post(
    "",
    response_model=MessageResponse,
    summary="Reseed Database",
    description="Delete all application data and insert the demo data set again.",
    responses={500: {"description": "Seeding failed; the transaction was rolled back"}},
)
async def reseed(session: SessionDep) -> MessageResponse:
    logger.info("Received request to reseed the database")
    try:
        await seed_database(session)
    except SQLAlchemyError as e:
        logger.error(f"Reseed failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"message": "Failed to reseed database", "error": str(e)},
        ) from e
    return MessageResponse(message="Database reseeded successfully")
