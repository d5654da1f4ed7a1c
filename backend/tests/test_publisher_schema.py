# -*- coding: UTF-8 -*-
"""
@Project : fota-server
@File    : test_publisher_schema.py
@Date    : 2026/10/20 10:15

固件表由发布方建表, 仅包含发布方的列
"""
import pytest

from httpx import ASGITransport, AsyncClient
from sqlalchemy import text
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from backend.app.fota.service.storage import FirmwareStore
from backend.database.db import get_db
from backend.main import app

PUBLISHER_DDL = (
    """
    CREATE TABLE firmware (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        firmware_id BIGINT NOT NULL UNIQUE,
        firmware_type VARCHAR(64) NOT NULL,
        version INTEGER NOT NULL,
        private BOOLEAN NOT NULL DEFAULT 0,
        payload BLOB NOT NULL
    )
    """,
    """
    CREATE TABLE devices (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        device_id VARCHAR(64) NOT NULL UNIQUE,
        firmware_id BIGINT NOT NULL
    )
    """,
)

PAYLOADS = {5: b'\x7fELF-five\x00', 6: b'\x00six\r\n' * 20000}


@pytest.fixture
async def publisher_session():
    engine = create_async_engine('sqlite+aiosqlite://', poolclass=StaticPool)
    async with engine.begin() as conn:
        for ddl in PUBLISHER_DDL:
            await conn.execute(text(ddl))
        await conn.execute(
            text(
                'INSERT INTO firmware (firmware_id, firmware_type, version, private, payload) '
                'VALUES (:firmware_id, :firmware_type, :version, :private, :payload)'
            ),
            [
                {'firmware_id': 5, 'firmware_type': 'sensorA', 'version': 3, 'private': 0, 'payload': PAYLOADS[5]},
                {'firmware_id': 6, 'firmware_type': 'sensorA', 'version': 5, 'private': 0, 'payload': PAYLOADS[6]},
            ],
        )
        await conn.execute(
            text('INSERT INTO devices (device_id, firmware_id) VALUES (:device_id, :firmware_id)'),
            {'device_id': 'dev1', 'firmware_id': 5},
        )

    session_factory = async_sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    async with session_factory() as session:
        yield session

    await engine.dispose()


@pytest.fixture
async def publisher_client(publisher_session):
    async def override_get_db():
        yield publisher_session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url='http://fota.test') as ac:
        yield ac
    app.dependency_overrides.clear()


async def test_store_reads_publisher_table(publisher_session):
    store = FirmwareStore(publisher_session)

    latest = await store.query_latest_public_by_type('sensorA')
    record = await store.get_by_firmware_id(latest[0].firmware_id)

    assert record.firmware_id == 6
    assert record.payload == PAYLOADS[6]


@pytest.mark.parametrize('params, firmware_id', [({}, 6), ({'id': 'dev1'}, 5)])
async def test_download_from_publisher_table(publisher_client, params, firmware_id):
    manifest = (await publisher_client.get('/sensorA.json', params=params)).json()
    assert manifest['bin'] == f'/sensorA.{firmware_id}.bin'

    response = await publisher_client.get(manifest['bin'])

    assert response.status_code == 200
    assert response.content == PAYLOADS[firmware_id]
    assert response.headers['content-length'] == str(len(PAYLOADS[firmware_id]))
