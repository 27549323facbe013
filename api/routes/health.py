"""Health check routes"""

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_db_session

router = APIRouter(tags=["Health"])
logger = logging.getLogger("mealtrack.api.health")


@router.get("/health-check")
def health_check():
    """Basic health check endpoint"""
    return {"status": "ok", "service": "MealTrack"}


@router.get("/health-check/db")
def database_check(db: Session = Depends(get_db_session)):
    """Round-trip to the database"""
    try:
        db.execute(text("SELECT 1"))
        return {"status": "ok", "database": "reachable"}
    except Exception as e:
        logger.exception("Database health check failed")
        return {"status": "degraded", "database": "unreachable", "error": str(e)}
