import logging

import pytest

from multiform_validator.config import settings


@pytest.fixture(autouse=True)
def fresh_logger():
    # The logger binds sys.stdout when first configured; rebuild it per test
    # so capsys sees the output.
    logger = logging.getLogger("multiform_validator")
    logger.handlers.clear()
    yield logger
    logger.handlers.clear()


@pytest.fixture
def results_dir(tmp_path, monkeypatch):
    path = tmp_path / "results"
    monkeypatch.setattr(settings, "RESULTS", str(path))
    return path
