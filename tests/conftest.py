import logging

import pytest


@pytest.fixture(autouse=True)
def reset_package_logger():
    """setup_logging() を呼ぶテストの後でも caplog が使えるように戻す"""
    yield
    logger = logging.getLogger("listup_law")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture(autouse=True)
def clear_settings_env(monkeypatch):
    for name in ("LOG_LEVEL", "LOG_FILE", "XML_ENCODING", "REGISTRY_ENCODING", "READ_CHUNK_SIZE", "STRATEGY"):
        monkeypatch.delenv(f"LISTUP_LAW_{name}", raising=False)
