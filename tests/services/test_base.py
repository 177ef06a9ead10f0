"""Tests for BaseService."""

from strext.config.settings import StrextSettings
from strext.services.base import BaseService
from strext.services.text import TextService


class TestBaseService:
    def test_settings_stored(self, settings: StrextSettings) -> None:
        service = BaseService(settings)
        assert service._settings is settings

    def test_fail_builds_error_result(self) -> None:
        result = BaseService._fail("op_name", "INVALID_INPUT", "bad", field="x")
        assert result.ok is False
        assert result.op == "op_name"
        assert result.error is not None
        assert result.error.code == "INVALID_INPUT"
        assert result.error.detail == {"field": "x"}

    def test_text_service_extends_base(self) -> None:
        assert issubclass(TextService, BaseService)
