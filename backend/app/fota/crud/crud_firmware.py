from collections.abc import Sequence

from sqlalchemy import Row, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy_crud_plus import CRUDPlus

from backend.app.fota.model import Device, Firmware


class CRUDFirmware(CRUDPlus[Firmware]):

    # 清单查询只取元数据列
    _manifest_columns = (Firmware.firmware_id, Firmware.version, Firmware.private, Firmware.firmware_type)

    async def get_by_firmware_id(self, db: AsyncSession, firmware_id: int) -> Firmware | None:
        return await self.select_model_by_column(db, firmware_id=firmware_id)

    async def get_latest_public_by_type(self, db: AsyncSession, firmware_type: str) -> Sequence[Row]:
        stmt = (
            select(*self._manifest_columns)
            .where(Firmware.private.is_(False), Firmware.firmware_type == firmware_type)
            .order_by(Firmware.version.desc(), Firmware.id.desc())
            .limit(1)
        )
        result = await db.execute(stmt)
        return result.all()

    async def get_latest_by_device(self, db: AsyncSession, device_id: str) -> Sequence[Row]:
        stmt = (
            select(*self._manifest_columns)
            .select_from(Device)
            .join(Firmware, Firmware.firmware_id == Device.firmware_id)
            .where(Device.device_id == device_id)
            .order_by(Firmware.version.desc(), Firmware.id.desc())
            .limit(1)
        )
        result = await db.execute(stmt)
        return result.all()


firmware_dao: CRUDFirmware = CRUDFirmware(Firmware)
