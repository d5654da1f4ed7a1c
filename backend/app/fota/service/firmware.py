# -*- coding: UTF-8 -*-
"""
@Project : fota-server
@File    : firmware.py
@Date    : 2026/10/12 11:50
"""
import re

from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.fota.service.resolver import FirmwareResolver, Found
from backend.app.fota.service.responder import BinaryDownload, render_binary, render_manifest
from backend.app.fota.service.storage import FirmwareStore
from backend.common.exception import errors
from backend.common.log import log
from backend.core.conf import settings

_FIRMWARE_ID_RE = re.compile(r'[0-9]{1,18}')


def parse_firmware_id(raw: str) -> int:
    """解析下载路径中的固件 ID, 非数字直接拒绝"""
    if not _FIRMWARE_ID_RE.fullmatch(raw):
        raise errors.InvalidIdentifierError(msg=f'固件 ID 非法: {raw!r}')
    return int(raw)


class FirmwareService:
    """固件服务类"""

    @staticmethod
    async def get_manifest(*, db: AsyncSession, firmware_type: str, device_id: str | None, host: str) -> bytes:
        """ 获取设备适用的固件清单 """
        resolver = FirmwareResolver(FirmwareStore(db))
        resolution = await resolver.resolve(device_id, firmware_type)
        if not isinstance(resolution, Found):
            log.info(f'无可用固件 [type={firmware_type}, device={device_id}]')
            raise errors.NotFoundError(msg='固件不存在')
        return render_manifest(resolution.record, settings.FOTA_MANIFEST_HOST or host)

    @staticmethod
    async def get_binary(*, db: AsyncSession, firmware_id: str) -> BinaryDownload:
        """ 下载固件 """
        pk = parse_firmware_id(firmware_id)
        record = await FirmwareStore(db).get_by_firmware_id(pk)
        if record is None:
            raise errors.NotFoundError(msg='固件不存在')
        return render_binary(record)


firmware_service: FirmwareService = FirmwareService()
