# -*- coding: UTF-8 -*-
"""
@Project : fota-server
@File    : firmware.py
@Date    : 2026/10/12 12:05
"""
from typing import Annotated

from fastapi import APIRouter, Path, Query, Request, Response
from fastapi.responses import StreamingResponse

from backend.app.fota.service.firmware import firmware_service
from backend.database.db import CurrentSession

router = APIRouter()

FirmwareType = Annotated[str, Path(description='固件类型', pattern=r'^[A-Za-z0-9_-]{1,64}$')]


# =============================
# 固件清单
# =============================
@router.get(
    '/{firmware_type}.json',
    summary='获取固件清单',
    response_class=Response,
    responses={200: {'content': {'application/json': {}}}},
)
async def get_manifest(
        request: Request,
        db: CurrentSession,
        firmware_type: FirmwareType,
        device_id: Annotated[str | None, Query(alias='id', max_length=64, description='设备 ID')] = None,
) -> Response:
    content = await firmware_service.get_manifest(
        db=db,
        firmware_type=firmware_type,
        device_id=device_id,
        host=request.url.hostname or '',
    )
    return Response(content=content, media_type='application/json')


# =============================
# 固件下载
# =============================
@router.get(
    '/{firmware_type}.{firmware_id}.bin',
    summary='下载固件',
    response_class=StreamingResponse,
    responses={200: {'content': {'application/octet-stream': {}}}},
)
async def download_firmware(
        db: CurrentSession,
        firmware_type: FirmwareType,
        firmware_id: Annotated[str, Path(description='固件 ID')],
) -> StreamingResponse:
    download = await firmware_service.get_binary(db=db, firmware_id=firmware_id)
    return StreamingResponse(download.iter_chunks(), media_type=download.media_type, headers=download.headers)
