"""Printify cache endpoints."""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.models.printify_cache import PrintifyCacheType, PrintifyCacheWrite
from app.services.printify_cache_service import PrintifyCacheService

router = APIRouter(prefix="/printify-cache", tags=["printify-cache"])


def get_printify_cache_service(db: Session = Depends(get_db)) -> PrintifyCacheService:
    return PrintifyCacheService(db)


@router.get("/{cache_type}/{external_id}")
def get_cache_entry(
    cache_type: PrintifyCacheType,
    external_id: str,
    service: PrintifyCacheService = Depends(get_printify_cache_service),
) -> dict[str, Any]:
    """Get a cached Printify object."""
    entry = service.get(cache_type, external_id)
    if not entry:
        raise HTTPException(status_code=404, detail="Cache entry not found")
    return entry.to_plain_object()


@router.put("/{cache_type}/{external_id}")
def put_cache_entry(
    cache_type: PrintifyCacheType,
    external_id: str,
    payload: PrintifyCacheWrite,
    service: PrintifyCacheService = Depends(get_printify_cache_service),
) -> dict[str, Any]:
    """Store a Printify object, replacing any previous copy."""
    return service.put(cache_type, external_id, payload.data).to_plain_object()


@router.delete("/{cache_type}/{external_id}")
def delete_cache_entry(
    cache_type: PrintifyCacheType,
    external_id: str,
    service: PrintifyCacheService = Depends(get_printify_cache_service),
) -> dict[str, Any]:
    """Drop a cached Printify object."""
    if not service.delete(cache_type, external_id):
        raise HTTPException(status_code=404, detail="Cache entry not found")
    return {"type": cache_type, "external_id": external_id, "deleted": True}
