import os
from pathlib import Path
from typing import Any, Callable, Optional, TextIO

import yaml

from memorizer.copy_policy import COPY_MODES
from .error_counter import ErrorCounter
from .yaml_loader import load_file, load_string
from .yaml_writer import YamlWriter

SCHEMA_VERSIONS = ("1.0", )
KNOWN_KEYS = ("schema-version", "copy-mode", "verbose")
# added by the loader, not written by users
LOADER_KEYS = ("__line__", "__fullpath__")

# MEMORIZER_VERBOSE overrides the "verbose" setting of the file
VERBOSE_ENV = "MEMORIZER_VERBOSE"
TRUE_WORDS = ("1", "true", "yes", "on")
FALSE_WORDS = ("0", "false", "no", "off")


class MemorizerConfig:
    def __init__(self):
        self.schema_version = SCHEMA_VERSIONS[-1]
        self.copy_mode = "deep"
        self.verbose = False
        self.source_object: Any = None
        self.error_counter = ErrorCounter()

    # fill content and print message if necessary
    # 'data' should have line number information
    def fill_and_validate(self, data: Any, source: Optional[str] = None):
        self.source_object = data
        self.error_counter = ErrorCounter(source)
        if not isinstance(data, dict):
            self.error_counter.record(
                "configuration must be a mapping of key: value, got %s" % type(data).__name__)
        else:
            line_info = data["__line__"]
            for key in data:
                if key not in KNOWN_KEYS and key not in LOADER_KEYS:
                    self.error_counter.record_at(
                        line_info.get(key), key, "unknown key")
            self.schema_version = self.check_choice_field(
                data, "schema-version", SCHEMA_VERSIONS, self.schema_version)
            self.copy_mode = self.check_choice_field(
                data, "copy-mode", COPY_MODES, self.copy_mode)
            self.verbose = self.check_bool_field(data, "verbose", self.verbose)
        self.apply_environment()

        if self.error_counter.error_count > 0:
            self.error_counter.print_errors()

    # YAML syntax error. nothing is filled, the defaults stand
    def fill_with_parse_error(self, error: yaml.YAMLError, source: Optional[str] = None):
        self.source_object = None
        self.error_counter = ErrorCounter(source)
        mark = getattr(error, "problem_mark", None)
        line = mark.line + 1 if mark is not None else None
        problem = getattr(error, "problem", None) or str(error)
        self.error_counter.record_at(line, "yaml", problem)
        self.apply_environment()
        self.error_counter.print_errors()

    def load_and_validate(self, load: Callable[[str], Any], arg: str, source: Optional[str] = None):
        try:
            data = load(arg)
        except yaml.YAMLError as e:
            self.fill_with_parse_error(e, source)
        else:
            self.fill_and_validate(data, source)

    def apply_environment(self):
        env = os.getenv(VERBOSE_ENV)
        if env is None:
            return
        if env.strip().lower() in TRUE_WORDS:
            self.verbose = True
        elif env.strip().lower() in FALSE_WORDS:
            self.verbose = False
        else:
            self.error_counter.record("environment variable %s=%s is not a boolean" % (
                VERBOSE_ENV, env))

    # read value from dictionary and verify the content.
    # if error is not found, return the value itself
    # else, record error message with line number information and return the default
    def check_choice_field(self, data: dict, key: str, choices, default_value: str) -> str:
        value = data.get(key)
        if value is None:
            return default_value
        if str(value) not in choices:
            self.error_counter.record_at(data["__line__"].get(key), key, "%s is not one of %s" % (
                value, ", ".join(choices)))
            return default_value
        return str(value)

    def check_bool_field(self, data: dict, key: str, default_value: bool) -> bool:
        value = data.get(key)
        if value is None:
            return default_value
        if not isinstance(value, bool):
            self.error_counter.record_at(
                data["__line__"].get(key), key, "%s is not true or false" % (value, ))
            return default_value
        return value

    def write_to(self, writer: YamlWriter):
        writer.comment("memorizer configuration file")
        writer.blank()
        writer.name("schema-version").value(self.schema_version)
        writer.comment(
            "how a cached value is duplicated before it is returned: %s" % ", ".join(COPY_MODES))
        writer.comment(
            "  deep: copy.deepcopy, shallow: copy.copy, none: return the cached object itself")
        writer.name("copy-mode").value(self.copy_mode)
        writer.comment("print every cache hit and miss")
        writer.name("verbose").value(self.verbose)

    def write_stream(self, stream: TextIO):
        self.write_to(YamlWriter(stream))

    def write_as_yaml(self, path: str):
        p = Path(path).resolve()
        p.parents[0].mkdir(parents=True, exist_ok=True)
        with p.open('w') as s:
            self.write_stream(s)

    @classmethod
    def from_yaml(cls, path: str) -> "MemorizerConfig":
        conf = MemorizerConfig()
        conf.load_and_validate(load_file, path, source=path)
        return conf

    @classmethod
    def from_string(cls, body: str) -> "MemorizerConfig":
        conf = MemorizerConfig()
        conf.load_and_validate(load_string, body)
        return conf

    @classmethod
    def auto_configure(cls) -> "MemorizerConfig":
        conf = MemorizerConfig()
        conf.apply_environment()
        if conf.error_counter.error_count > 0:
            conf.error_counter.print_errors()
        return conf
