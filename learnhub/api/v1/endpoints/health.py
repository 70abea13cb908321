# learnhub/api/v1/endpoints/health.py
from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.orm import Session

from learnhub.core.config import settings
from learnhub.db.session import get_db

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/live")
def report_alive():
    return {"status": "ok", "service": settings.PROJECT_NAME}


@router.get("/db")
def report_store(db: Session = Depends(get_db)):
    """Round-trips the store; failures surface as a StoreFailure."""
    db.execute(text("SELECT 1"))
    return {"status": "ok", "dialect": db.get_bind().dialect.name}
