import pytest
from pydantic import ValidationError

from zoned_date.application.settings import DEFAULT_ZONE_ENV, TAG_ABSOLUTE_ENV, ZoneSettings


def test_defaults():
    settings = ZoneSettings()
    assert settings.default_zone is None
    assert settings.tag_absolute_constructions is False


def test_from_env_reads_zone_and_flag():
    settings = ZoneSettings.from_env({DEFAULT_ZONE_ENV: "Europe/London", TAG_ABSOLUTE_ENV: "true"})
    assert settings.default_zone == "Europe/London"
    assert settings.tag_absolute_constructions is True


def test_from_env_treats_empty_values_as_unset():
    settings = ZoneSettings.from_env({DEFAULT_ZONE_ENV: "", TAG_ABSOLUTE_ENV: ""})
    assert settings.default_zone is None
    assert settings.tag_absolute_constructions is False


def test_blank_zone_is_rejected():
    with pytest.raises(ValidationError):
        ZoneSettings(default_zone="   ")


def test_assignment_is_validated():
    settings = ZoneSettings()
    with pytest.raises(ValidationError):
        settings.tag_absolute_constructions = "sometimes"
