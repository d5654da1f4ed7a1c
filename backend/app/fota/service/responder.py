# -*- coding: UTF-8 -*-
"""
@Project : fota-server
@File    : responder.py
@Date    : 2026/10/12 11:34
"""
from collections.abc import Iterator
from dataclasses import dataclass

from backend.app.fota.schema.firmware import FirmwareManifest, FirmwareRecord
from backend.common.exception import errors
from backend.core.conf import settings


@dataclass(frozen=True, slots=True)
class BinaryDownload:
    """固件下载: 响应头 + 原始字节"""

    headers: dict[str, str]
    payload: bytes
    chunk_size: int

    @property
    def media_type(self) -> str:
        return self.headers['Content-Type']

    def iter_chunks(self) -> Iterator[bytes]:
        view = memoryview(self.payload)
        for offset in range(0, len(view), self.chunk_size):
            yield bytes(view[offset:offset + self.chunk_size])


def build_manifest(record: FirmwareRecord, host: str) -> FirmwareManifest:
    return FirmwareManifest(
        type=record.firmware_type,
        version=record.version,
        host=host,
        port=settings.FOTA_MANIFEST_PORT,
        bin=f'/{record.bin_name}',
    )


def render_manifest(record: FirmwareRecord, host: str) -> bytes:
    """生成 JSON 清单, 路径中的 / 不转义"""
    return build_manifest(record, host).model_dump_json().encode('utf-8')


def render_binary(record: FirmwareRecord, chunk_size: int | None = None) -> BinaryDownload:
    """生成固件下载响应头, 内容原样透传"""
    if record.payload is None:
        # 清单查询得到的记录不含固件内容
        raise errors.ServerError(msg=f'固件内容未加载 [firmware_id={record.firmware_id}]')
    payload = record.payload
    headers = {
        'Content-Description': 'File Transfer',
        'Content-Type': 'application/octet-stream',
        'Content-Length': str(len(payload)),
        'Content-Disposition': f'attachment; filename="{record.bin_name}"',
        'Content-Transfer-Encoding': 'binary',
        'Expires': '0',
        'Cache-Control': 'must-revalidate, post-check=0, pre-check=0',
        'Pragma': 'public',
    }
    return BinaryDownload(headers=headers, payload=payload, chunk_size=chunk_size or settings.FOTA_CHUNK_SIZE)
