"""Test logger setup and the async log context."""

import logging

import pytest

from activitybot.infra.logger import AsyncLogContext, setup_logger, get_logger


class TestSetupLogger:
    def test_force_reconfigures_level_and_file(self, tmp_path):
        log_file = tmp_path / "logs" / "bot.log"

        setup_logger(level="DEBUG", log_file=str(log_file), force=True)
        get_logger("activitybot.test").debug("written to file")

        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger("telegram").level == logging.WARNING
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "written to file" in log_file.read_text()

        setup_logger(level="INFO", force=True)


class TestAsyncLogContext:
    async def test_records_duration(self):
        async with AsyncLogContext(get_logger("t"), "op", key="value") as ctx:
            pass
        assert ctx.duration >= 0
        assert ctx.context == {"key": "value"}

    async def test_does_not_swallow(self):
        with pytest.raises(ValueError):
            async with AsyncLogContext(get_logger("t"), "op"):
                raise ValueError("boom")
