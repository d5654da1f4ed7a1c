# -*- coding: UTF-8 -*-
"""
@Project : fota-server
@File    : conftest.py
@Date    : 2026/10/13 09:30
"""
import os

# 测试使用内存 sqlite, 需在导入 backend 配置前设置
os.environ['DATABASE_TYPE'] = 'sqlite'
os.environ['DATABASE_SCHEMA'] = ':memory:'
os.environ['DATABASE_INIT_TABLES'] = 'false'
os.environ['LOG_FILE_ENABLED'] = 'false'

import pytest  # noqa: E402

from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from backend.app.fota.model import Device, Firmware  # noqa: E402
from backend.common.model import MappedBase  # noqa: E402
from backend.database.db import get_db  # noqa: E402
from backend.main import app  # noqa: E402

# 超过默认分块大小, 覆盖多块传输
SENSOR_A_V5_PAYLOAD = bytes(range(256)) * 600


def seed_firmwares() -> list[Firmware]:
    return [
        Firmware(firmware_id=5, firmware_type='sensorA', version=3, payload=b'\x00firmware-5\r\n\xff'),
        Firmware(firmware_id=6, firmware_type='sensorA', version=5, payload=SENSOR_A_V5_PAYLOAD),
        Firmware(firmware_id=7, firmware_type='sensorA', version=9, payload=b'private-7', private=True),
        Firmware(firmware_id=8, firmware_type='sensorB', version=9, payload=b'sensorB-9'),
        Firmware(firmware_id=9, firmware_type='sensorB', version=10, payload=b'sensorB-10'),
        Firmware(firmware_id=10, firmware_type='sensorC', version=1, payload=b'private-only', private=True),
    ]


def seed_devices() -> list[Device]:
    return [
        Device(device_id='dev1', firmware_id=5),
        Device(device_id='dev2', firmware_id=999),
        Device(device_id='dev3', firmware_id=7),
    ]


@pytest.fixture
async def db_session():
    engine = create_async_engine('sqlite+aiosqlite://', poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(MappedBase.metadata.create_all)

    session_factory = async_sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    async with session_factory() as session:
        session.add_all(seed_firmwares())
        session.add_all(seed_devices())
        await session.commit()
        yield session

    await engine.dispose()


@pytest.fixture
async def client(db_session):
    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url='http://fota.test') as ac:
        yield ac
    app.dependency_overrides.clear()
