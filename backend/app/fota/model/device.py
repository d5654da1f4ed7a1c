# -*- coding: UTF-8 -*-
"""
@Project : fota-server
@File    : device.py
@Date    : 2026/10/12 10:41
"""
import sqlalchemy as sa

from sqlalchemy.orm import Mapped, mapped_column

from backend.common.model import DataClassBase, id_key


class Device(DataClassBase):
    """设备固件绑定表"""

    __tablename__ = 'devices'

    id: Mapped[id_key] = mapped_column(init=False)
    device_id: Mapped[str] = mapped_column(sa.String(64), unique=True, index=True, comment='设备 ID')
    # 不设外键, 允许指向私有或尚未发布的固件
    firmware_id: Mapped[int] = mapped_column(sa.BigInteger, index=True, comment='绑定的固件 ID')
