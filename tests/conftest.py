"""Shared fixtures for the Document AI parser tests."""

import json
import logging
from pathlib import Path

import pytest

import docai_parser
from docai_parser.config import ConfigurationManager
from docai_parser.utils.logger import ROOT_LOGGER_NAME

SAMPLE_DIR = Path(__file__).parent / "sample_data"


@pytest.fixture(autouse=True)
def reset_config():
    """Each test starts from the bundled settings.yaml."""
    ConfigurationManager.reset()
    yield
    ConfigurationManager.reset()


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo setup_logger() so caplog keeps seeing package records."""
    yield
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.fixture
def sample_json_text() -> str:
    return (SAMPLE_DIR / "expense_response.json").read_text(encoding="utf-8")


@pytest.fixture
def sample_data(sample_json_text) -> dict:
    return json.loads(sample_json_text)


@pytest.fixture
def document(sample_data):
    return docai_parser.parse(sample_data, processor_type="expense_parser")


def money(units, nanos, currency_code=None) -> dict:
    """Build a normalizedValue dict holding a moneyValue."""
    value = {"units": units, "nanos": nanos}
    if currency_code:
        value["currencyCode"] = currency_code
    return {"moneyValue": value}
