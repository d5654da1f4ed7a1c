# -*- coding: UTF-8 -*-
"""
@Project : fota-server
@File    : firmware.py
@Date    : 2026/10/12 10:52
"""
from pydantic import ConfigDict, Field

from backend.common.schema import SchemaBase


class FirmwareRecord(SchemaBase):
    """固件记录 (只读)"""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    firmware_id: int = Field(description='固件 ID')
    version: int = Field(description='固件版本')
    private: bool = Field(default=False, description='是否私有')
    firmware_type: str = Field(description='固件类型')
    # 清单查询不加载二进制
    payload: bytes | None = Field(default=None, repr=False, description='固件二进制')

    @property
    def size(self) -> int:
        return len(self.payload) if self.payload is not None else 0

    @property
    def bin_name(self) -> str:
        """固件文件名, 形如 <firmware_type>.<firmware_id>.bin"""
        return f'{self.firmware_type}.{self.firmware_id}.bin'


class FirmwareManifest(SchemaBase):
    """OTA 固件清单, 设备据此拼接下载地址"""

    type: str = Field(description='固件类型')
    version: int = Field(description='固件版本')
    host: str = Field(description='下载主机')
    port: str = Field(description='下载端口')
    bin: str = Field(description='固件下载路径')
