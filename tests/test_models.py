"""Tests for result envelopes and logging setup."""

import logging

from config.logging_config import LOGGER_NAMESPACE, get_logger, setup_logging
from core.models import error_result, result_text, success_result


def test_success_result_is_pretty_printed_json():
    result = success_result({"commit": {"sha": "C2"}})

    assert result.isError is False
    assert len(result.content) == 1
    assert result_text(result) == '{\n  "commit": {\n    "sha": "C2"\n  }\n}'


def test_error_result_carries_cause():
    result = error_result("Error pushing files: Not Found")

    assert result.isError is True
    assert result.content[0].type == "text"
    assert result_text(result) == "Error pushing files: Not Found"


def test_setup_logging_installs_one_stderr_handler():
    setup_logging("debug")
    root = setup_logging("WARNING")

    assert root.name == LOGGER_NAMESPACE
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1
    assert get_logger("dispatcher").name == f"{LOGGER_NAMESPACE}.dispatcher"
