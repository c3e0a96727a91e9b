from fastapi import APIRouter

from apps.backend.services.settings import settings


router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
def health_root():
    return {"ok": True, "version": settings.APP_VERSION}
