import pytest
import yaml
from pydantic import ValidationError

from chaincodec.bootstrap import deps
from chaincodec.bootstrap.config.loader import ENV_VAR, get_configfile
from chaincodec.bootstrap.config.settings import ChaincodecConfig
from chaincodec.core.models.config import CodecConfig


@pytest.mark.ut
def test_defaults(isolated_env):
    conf = ChaincodecConfig()

    assert conf.logging.level == "INFO"
    assert conf.codec.encoding == "utf-8"
    assert conf.codec.decode_errors == "replace"
    assert conf.codec.log_parse_fallback is True
    assert conf.get_codec_config() == CodecConfig()


@pytest.mark.ut
def test_no_configfile_by_default(isolated_env):
    assert get_configfile() is None


@pytest.mark.ut
def test_configfile_from_working_directory(isolated_env):
    file = isolated_env / "chaincodec.yaml"
    file.write_text(yaml.dump({"codec": {"encoding": "utf-16"}}))

    assert get_configfile() == file
    assert ChaincodecConfig().codec.encoding == "utf-16"


@pytest.mark.ut
def test_configfile_from_env(isolated_env, monkeypatch, config_file):
    monkeypatch.setenv(ENV_VAR, str(config_file))

    conf = ChaincodecConfig()

    assert conf.logging.level == "DEBUG"
    assert conf.codec.encoding == "latin-1"
    assert conf.codec.log_parse_fallback is False


@pytest.mark.ut
def test_env_overrides_yaml(isolated_env, monkeypatch, config_file):
    monkeypatch.setenv(ENV_VAR, str(config_file))
    monkeypatch.setenv("CHAINCODEC_CODEC__ENCODING", "ascii")

    assert ChaincodecConfig().codec.encoding == "ascii"


@pytest.mark.ut
def test_explicit_file_overrides_env(isolated_env, monkeypatch, config_file):
    monkeypatch.setenv("CHAINCODEC_CODEC__ENCODING", "ascii")

    conf = ChaincodecConfig.from_file(config_file)

    assert conf.codec.encoding == "latin-1"
    assert conf.get_codec_config() == CodecConfig(
        encoding="latin-1",
        decode_errors="strict",
        log_parse_fallback=False,
    )


@pytest.mark.ut
def test_missing_explicit_file(isolated_env):
    with pytest.raises(SystemExit):
        get_configfile(str(isolated_env / "missing.yaml"))


@pytest.mark.ut
def test_missing_file_from_env(isolated_env, monkeypatch):
    monkeypatch.setenv(ENV_VAR, str(isolated_env / "missing.yaml"))

    with pytest.raises(SystemExit):
        get_configfile()


@pytest.mark.ut
def test_unknown_encoding_rejected(isolated_env):
    with pytest.raises(ValidationError):
        ChaincodecConfig(codec={"encoding": "no-such-codec"})


@pytest.mark.ut
def test_unknown_log_level_rejected(isolated_env):
    with pytest.raises(ValidationError):
        ChaincodecConfig(logging={"level": "verbose"})


@pytest.mark.ut
def test_get_config_reports_validation_errors(isolated_env):
    file = isolated_env / "bad.yaml"
    file.write_text(yaml.dump({"codec": {"decode_errors": "explode"}}))

    with pytest.raises(SystemExit) as exc_info:
        deps.get_config(str(file))

    assert "codec.decode_errors" in str(exc_info.value)


@pytest.mark.ut
def test_get_config_reports_invalid_yaml(isolated_env):
    file = isolated_env / "broken.yaml"
    file.write_text("codec: [unclosed")

    with pytest.raises(SystemExit):
        deps.get_config(str(file))


@pytest.mark.ut
def test_get_transform_uses_config(isolated_env, config_file):
    transform = deps.get_transform(str(config_file))

    assert transform.config.encoding == "latin-1"
    assert deps.get_transform(str(config_file)) is transform


@pytest.mark.ut
def test_explicit_file_ignores_implicit_sources(isolated_env, monkeypatch, config_file):
    monkeypatch.setenv(ENV_VAR, str(isolated_env / "missing.yaml"))

    conf = ChaincodecConfig.from_file(config_file)

    assert conf.codec.encoding == "latin-1"
    assert isinstance(conf, ChaincodecConfig)
