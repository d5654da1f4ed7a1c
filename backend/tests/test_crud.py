# -*- coding: UTF-8 -*-
"""
@Project : fota-server
@File    : test_crud.py
@Date    : 2026/10/13 10:30
"""
import pytest

from sqlalchemy.exc import OperationalError

from backend.app.fota.crud.crud_firmware import firmware_dao
from backend.app.fota.service.storage import FirmwareStore
from backend.common.exception import errors
from backend.tests.conftest import SENSOR_A_V5_PAYLOAD


async def test_latest_public_by_type(db_session):
    rows = await firmware_dao.get_latest_public_by_type(db_session, 'sensorA')

    assert [(row.firmware_id, row.version) for row in rows] == [(6, 5)]


async def test_latest_public_compares_versions_numerically(db_session):
    rows = await firmware_dao.get_latest_public_by_type(db_session, 'sensorB')

    assert rows[0].firmware_id == 9
    assert rows[0].version == 10


async def test_latest_public_skips_private_only_type(db_session):
    assert await firmware_dao.get_latest_public_by_type(db_session, 'sensorC') == []


async def test_latest_by_device_includes_private(db_session):
    rows = await firmware_dao.get_latest_by_device(db_session, 'dev3')

    assert rows[0].firmware_id == 7
    assert rows[0].private is True


async def test_latest_by_device_with_missing_firmware(db_session):
    assert await firmware_dao.get_latest_by_device(db_session, 'dev2') == []
    assert await firmware_dao.get_latest_by_device(db_session, 'unknown') == []


async def test_store_maps_rows_to_records(db_session):
    store = FirmwareStore(db_session)

    records = await store.query_latest_by_device('dev1')

    assert records[0].firmware_id == 5
    assert records[0].firmware_type == 'sensorA'
    assert records[0].payload is None


async def test_store_get_by_firmware_id_loads_payload(db_session):
    record = await FirmwareStore(db_session).get_by_firmware_id(6)

    assert record.payload == SENSOR_A_V5_PAYLOAD
    assert record.size == len(SENSOR_A_V5_PAYLOAD)


async def test_store_get_by_unknown_firmware_id(db_session):
    assert await FirmwareStore(db_session).get_by_firmware_id(404) is None


async def test_store_wraps_database_errors(db_session, monkeypatch):
    async def broken(*args, **kwargs):
        raise OperationalError('SELECT', {}, Exception('connection lost'))

    monkeypatch.setattr(firmware_dao, 'get_latest_public_by_type', broken)

    with pytest.raises(errors.StorageUnavailableError) as exc_info:
        await FirmwareStore(db_session).query_latest_public_by_type('sensorA')
    assert exc_info.value.code == 503
    assert isinstance(exc_info.value.__cause__, OperationalError)


@pytest.mark.parametrize(
    'dao_method, call',
    [
        ('get_latest_by_device', lambda store: store.query_latest_by_device('dev1')),
        ('get_by_firmware_id', lambda store: store.get_by_firmware_id(6)),
    ],
)
async def test_store_wraps_database_errors_on_device_and_binary_queries(db_session, monkeypatch, dao_method, call):
    async def broken(*args, **kwargs):
        raise OperationalError('SELECT', {}, Exception('connection lost'))

    monkeypatch.setattr(firmware_dao, dao_method, broken)

    with pytest.raises(errors.StorageUnavailableError) as exc_info:
        await call(FirmwareStore(db_session))
    assert isinstance(exc_info.value.__cause__, OperationalError)
