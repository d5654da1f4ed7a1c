# -*- coding: UTF-8 -*-
"""
@Project : fota-server
@File    : firmware.py
@Date    : 2026/10/12 10:41
"""
import sqlalchemy as sa

from sqlalchemy.orm import Mapped, mapped_column

from backend.common.model import DataClassBase, id_key


class Firmware(DataClassBase):
    """固件表"""

    __tablename__ = 'firmware'

    id: Mapped[id_key] = mapped_column(init=False)
    firmware_id: Mapped[int] = mapped_column(sa.BigInteger, unique=True, index=True, comment='固件 ID')
    firmware_type: Mapped[str] = mapped_column(sa.String(64), index=True, comment='固件类型')
    version: Mapped[int] = mapped_column(sa.Integer, comment='固件版本 (整数, 数值比较)')
    payload: Mapped[bytes] = mapped_column(sa.LargeBinary(length=(2**32) - 1), repr=False, comment='固件二进制')

    private: Mapped[bool] = mapped_column(default=False, comment='是否私有 (私有固件仅对绑定设备可见)')
