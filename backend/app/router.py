from fastapi import APIRouter

from backend.app.fota.api.router import v1 as fota_v1

router = APIRouter()

router.include_router(fota_v1)


@router.get("/health")
async def health_check():
    """健康检查端点"""
    return {"status": "ok", "message": "Service is healthy"}
