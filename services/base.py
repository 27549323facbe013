"""
Shared transaction handling for the service layer.
"""

import logging
from contextlib import contextmanager
from typing import Generator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.exceptions import StoreError

logger = logging.getLogger("mealtrack.services")


@contextmanager
def store_guard(db: Session, action: str) -> Generator[Session, None, None]:
    """
    Roll back on any failure inside the block.

    Driver/ORM failures are re-raised as StoreError (original on __cause__);
    domain errors propagate unchanged.
    """
    try:
        yield db
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Store failure during %s", action)
        raise StoreError(f"Store failure during {action}") from e
    except Exception:
        db.rollback()
        raise
