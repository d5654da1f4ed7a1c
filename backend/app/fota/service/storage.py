# -*- coding: UTF-8 -*-
"""
@Project : fota-server
@File    : storage.py
@Date    : 2026/10/12 11:05
"""
from collections.abc import Sequence
from typing import Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.fota.crud.crud_firmware import firmware_dao
from backend.app.fota.schema.firmware import FirmwareRecord
from backend.common.exception import errors
from backend.common.log import log


class FirmwareStorage(Protocol):
    """固件存储读取接口, 返回结果按版本降序"""

    async def query_latest_public_by_type(self, firmware_type: str) -> Sequence[FirmwareRecord]: ...

    async def query_latest_by_device(self, device_id: str) -> Sequence[FirmwareRecord]: ...

    async def get_by_firmware_id(self, firmware_id: int) -> FirmwareRecord | None: ...


class FirmwareStore:
    """基于数据库会话的固件存储"""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def query_latest_public_by_type(self, firmware_type: str) -> Sequence[FirmwareRecord]:
        try:
            rows = await firmware_dao.get_latest_public_by_type(self.db, firmware_type)
        except SQLAlchemyError as e:
            log.error(f'查询公开固件失败 [type={firmware_type}]: {e}')
            raise errors.StorageUnavailableError(msg='固件存储不可用') from e
        return [FirmwareRecord.model_validate(row) for row in rows]

    async def query_latest_by_device(self, device_id: str) -> Sequence[FirmwareRecord]:
        try:
            rows = await firmware_dao.get_latest_by_device(self.db, device_id)
        except SQLAlchemyError as e:
            log.error(f'查询设备绑定固件失败 [device={device_id}]: {e}')
            raise errors.StorageUnavailableError(msg='固件存储不可用') from e
        return [FirmwareRecord.model_validate(row) for row in rows]

    async def get_by_firmware_id(self, firmware_id: int) -> FirmwareRecord | None:
        try:
            firmware = await firmware_dao.get_by_firmware_id(self.db, firmware_id)
        except SQLAlchemyError as e:
            log.error(f'读取固件失败 [firmware_id={firmware_id}]: {e}')
            raise errors.StorageUnavailableError(msg='固件存储不可用') from e
        if firmware is None:
            return None
        return FirmwareRecord.model_validate(firmware)
