# -*- coding: UTF-8 -*-
"""
@Project : fota-server
@File    : resolver.py
@Date    : 2026/10/12 11:20

固件版本解析

1. 未提供设备 ID: 取该类型下非私有、版本最高的固件
2. 提供设备 ID: 取设备绑定的固件 (不过滤私有)
3. 设备无绑定记录: 回退到 1, 过滤条件使用请求中的固件类型
4. 仍无结果: NotFound
"""
from collections.abc import Sequence
from dataclasses import dataclass

from backend.app.fota.schema.firmware import FirmwareRecord
from backend.app.fota.service.storage import FirmwareStorage
from backend.common.log import log


@dataclass(frozen=True, slots=True)
class Found:
    record: FirmwareRecord


@dataclass(frozen=True, slots=True)
class NotFound:
    firmware_type: str
    device_id: str | None = None


Resolution = Found | NotFound


def _latest(rows: Sequence[FirmwareRecord]) -> FirmwareRecord:
    # 同版本取存储返回顺序中的第一条
    return max(rows, key=lambda row: row.version)


class FirmwareResolver:
    """固件解析器, 存储由调用方注入"""

    def __init__(self, storage: FirmwareStorage) -> None:
        self.storage = storage

    async def resolve(self, device_id: str | None, firmware_type: str) -> Resolution:
        if device_id:
            rows = await self.storage.query_latest_by_device(device_id)
            if rows:
                record = _latest(rows)
                log.debug(f'设备绑定固件 [device={device_id}, firmware_id={record.firmware_id}]')
                return Found(record)
            log.debug(f'设备无绑定, 回退到公开固件 [device={device_id}, type={firmware_type}]')

        rows = await self.storage.query_latest_public_by_type(firmware_type)
        if rows:
            return Found(_latest(rows))

        return NotFound(firmware_type=firmware_type, device_id=device_id or None)
