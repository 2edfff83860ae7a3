"""
NexParcel Backend — Configuration Tests
=========================================

What we test:
    ✅ Unknown stats timezones are rejected when settings load
    ✅ UTC is always accepted
    ✅ Log level and currency normalization
"""

import pytest
from pydantic import ValidationError as SettingsValidationError

from nexparcel.config import Settings


class TestStatsTimezone:

    def test_utc(self):
        assert Settings(stats_timezone="UTC").stats_timezone == "UTC"

    @pytest.mark.parametrize("zone", ["Mars/Olympus_Mons", "../etc/passwd", "not a zone"])
    def test_unknown_zone_fails_at_startup(self, zone):
        with pytest.raises(SettingsValidationError) as exc_info:
            Settings(stats_timezone=zone)

        assert "stats_timezone" in str(exc_info.value)


class TestNormalization:

    def test_log_level_is_uppercased(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(SettingsValidationError):
            Settings(log_level="chatty")

    def test_currency_is_lowercased(self):
        assert Settings(payment_currency="USD").payment_currency == "usd"
