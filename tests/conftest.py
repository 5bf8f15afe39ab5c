import logging
import os

import pytest
import yaml

from chaincodec.bootstrap import deps
from chaincodec.bootstrap.config.loader import ENV_VAR
from chaincodec.core.facade import Transform
from chaincodec.core.models.config import CodecConfig


@pytest.fixture
def logger() -> logging.Logger:
    return logging.getLogger("tests.transform")


@pytest.fixture
def transform(logger) -> Transform:
    return Transform(CodecConfig(), logger)


@pytest.fixture
def isolated_env(monkeypatch, tmp_path):
    """
    No config file from the environment or the working directory, no
    CHAINCODEC_* variables, and empty dependency caches.
    """
    monkeypatch.delenv(ENV_VAR, raising=False)
    for name in list(os.environ):
        if name.startswith("CHAINCODEC_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)

    deps.get_config.cache_clear()
    deps.get_transform.cache_clear()
    deps.get_serializer.cache_clear()
    yield tmp_path
    deps.get_config.cache_clear()
    deps.get_transform.cache_clear()
    deps.get_serializer.cache_clear()


@pytest.fixture
def config_file(tmp_path):
    file = tmp_path / "custom.yaml"
    data = {
        "logging": {
            "level": "debug",
        },
        "codec": {
            "encoding": "latin-1",
            "decode_errors": "strict",
            "log_parse_fallback": False,
        }
    }
    file.write_text(yaml.dump(data))
    return file