import os
import re

import pytest
from memorizer_config import MemorizerConfig
from memorizer_config.config import VERBOSE_ENV


@pytest.fixture(autouse=True)
def no_verbose_env(monkeypatch):
    monkeypatch.delenv(VERBOSE_ENV, raising=False)


def test_configure_and_parse(tmp_path) -> None:
    test_conf_file_path = os.path.join(str(tmp_path), "conf", "memorizer.yml")
    conf = MemorizerConfig.auto_configure()
    conf.copy_mode = "shallow"
    conf.verbose = True

    conf.write_as_yaml(test_conf_file_path)

    conf = MemorizerConfig.from_yaml(path=test_conf_file_path)

    assert conf.source_object["__fullpath__"].endswith(
        os.path.join("conf", "memorizer.yml"))
    assert conf.error_counter.error_count == 0
    assert conf.schema_version == "1.0"
    assert conf.copy_mode == "shallow"
    assert conf.verbose is True


def test_defaults() -> None:
    conf = MemorizerConfig.auto_configure()
    assert conf.copy_mode == "deep"
    assert conf.verbose is False


def test_errors_have_line_numbers(capsys) -> None:
    conf = MemorizerConfig.from_string(
        "schema-version: 1.0\ncopy-mode: clone\nverbose: maybe\ncolor: red\n")
    assert conf.error_counter.error_count == 3
    messages = conf.error_counter.error_messages
    assert "line 4: @color: unknown key" in messages
    assert "line 2: @copy-mode: clone is not one of deep, shallow, none" in messages
    assert "line 3: @verbose: maybe is not true or false" in messages
    # invalid values fall back to the defaults
    assert conf.copy_mode == "deep"
    assert conf.verbose is False
    assert "total 3 errors are found" in capsys.readouterr().out


def test_unsupported_schema_version() -> None:
    conf = MemorizerConfig.from_string("schema-version: 2.0\n")
    assert conf.error_counter.error_count == 1
    assert conf.schema_version == "1.0"


def test_empty_document() -> None:
    conf = MemorizerConfig.from_string("")
    assert conf.error_counter.error_count == 1
    assert conf.copy_mode == "deep"


def test_environment_override(monkeypatch) -> None:
    monkeypatch.setenv(VERBOSE_ENV, "yes")
    conf = MemorizerConfig.from_string("verbose: false\n")
    assert conf.verbose is True

    monkeypatch.setenv(VERBOSE_ENV, "0")
    conf = MemorizerConfig.from_string("verbose: true\n")
    assert conf.verbose is False

    monkeypatch.setenv(VERBOSE_ENV, "loud")
    conf = MemorizerConfig.from_string("verbose: true\n")
    assert conf.verbose is True
    assert conf.error_counter.error_count == 1


def test_syntax_error_is_recorded(capsys) -> None:
    conf = MemorizerConfig.from_string("copy-mode: [deep\n")
    assert conf.error_counter.error_count == 1
    assert re.match(r"line \d+: @yaml: ", conf.error_counter.error_messages[0])
    assert conf.copy_mode == "deep"
    assert conf.verbose is False
    assert "total 1 errors are found" in capsys.readouterr().out


def test_syntax_error_in_file(tmp_path) -> None:
    path = tmp_path / "memorizer.yml"
    path.write_text("schema-version: 1.0\nverbose: {true\n")
    conf = MemorizerConfig.from_yaml(str(path))
    assert conf.error_counter.error_count == 1
    assert conf.error_counter.source == str(path)
    assert conf.source_object is None
    assert conf.verbose is False


def test_dunder_user_key_is_unknown() -> None:
    conf = MemorizerConfig.from_string("copy-mode: deep\n__colour: red\n")
    assert conf.error_counter.error_messages == [
        "line 2: @__colour: unknown key"]


def test_auto_configure_prints_environment_error(monkeypatch, capsys) -> None:
    monkeypatch.setenv(VERBOSE_ENV, "loud")
    conf = MemorizerConfig.auto_configure()
    assert conf.error_counter.error_count == 1
    out = capsys.readouterr().out
    assert "total 1 errors are found" in out
    assert "MEMORIZER_VERBOSE=loud is not a boolean" in out
