from datetime import datetime, timedelta, timezone

from freezegun import freeze_time

from notekeeper.core import config
from notekeeper.utils.datetime_utils import as_aware, now, now_iso, to_iso, to_store_precision


@freeze_time('2026-03-01 12:00:00.987654')
def test_now_utc():
    assert now() == datetime(2026, 3, 1, 12, 0, 0, 987654, tzinfo=timezone.utc)
    assert now_iso() == '2026-03-01T12:00:00.987Z'


@freeze_time('2026-03-01 12:00:00')
def test_now_configured_timezone(monkeypatch):
    monkeypatch.setenv('TIMEZONE', 'Europe/Moscow')
    config.reset_settings()
    current = now()
    assert current.utcoffset() == timedelta(hours=3)
    assert current == datetime(2026, 3, 1, 12, tzinfo=timezone.utc)
    assert to_iso(current) == '2026-03-01T15:00:00.000+03:00'


def test_invalid_timezone_falls_back_to_utc(monkeypatch):
    monkeypatch.setenv('TIMEZONE', 'Mars/Olympus_Mons')
    config.reset_settings()
    assert now().utcoffset() == timedelta(0)


def test_to_store_precision():
    dt = datetime(2026, 3, 1, 12, 0, 0, 123999, tzinfo=timezone.utc)
    assert to_store_precision(dt) == datetime(2026, 3, 1, 12, 0, 0, 123000, tzinfo=timezone.utc)


def test_as_aware():
    naive = datetime(2026, 3, 1, 12)
    assert as_aware(naive).tzinfo is timezone.utc
    aware = datetime(2026, 3, 1, 12, tzinfo=timezone(timedelta(hours=2)))
    assert as_aware(aware) is aware


def test_to_iso_none():
    assert to_iso(None) is None
