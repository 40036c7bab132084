# write flat "key: value" configuration as YAML, with comments

from typing import TextIO


def yaml_scalar(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class YamlWriter:
    def __init__(self, stream: TextIO):
        self.stream = stream

    def name(self, key: str) -> "YamlWriter":
        self.stream.write(key)
        self.stream.write(":")
        return self

    def value(self, value) -> "YamlWriter":
        self.stream.write(" ")
        self.stream.write(yaml_scalar(value))
        self.stream.write("\n")
        return self

    def comment(self, body: str) -> "YamlWriter":
        self.stream.write("# ")
        self.stream.write(body)
        self.stream.write("\n")
        return self

    def blank(self) -> "YamlWriter":
        self.stream.write("\n")
        return self
