import pytest

from zoned_date.application.settings import DEFAULT_ZONE_ENV
from zoned_date.main import main


def test_prints_each_requested_zone(capsys):
    main(["UTC", "Asia/Kolkata"])
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("UTC: ")
    assert lines[0].endswith("GMT+0000 (UTC)")
    assert lines[1].endswith("GMT+0530 (IST)")


def test_uses_default_zone_from_environment(monkeypatch, capsys):
    monkeypatch.setenv(DEFAULT_ZONE_ENV, "UTC")
    main([])
    assert capsys.readouterr().out.startswith("UTC: ")


def test_requires_a_zone(monkeypatch):
    monkeypatch.delenv(DEFAULT_ZONE_ENV, raising=False)
    with pytest.raises(SystemExit):
        main([])
