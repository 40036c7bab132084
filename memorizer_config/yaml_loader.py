import io
import os
from typing import Any
import yaml
from yaml.loader import SafeLoader

# every mapping gets a "__line__" entry: key -> line number of the key.
# "__begin__" is the first line of the mapping itself.


class LineNumberLoader(SafeLoader):
    def construct_mapping(self, node, deep=False):
        line_info = {"__begin__": node.start_mark.line + 1}
        for k, _ in node.value:
            line_info[k.value] = k.start_mark.line + 1

        mapping = super().construct_mapping(node, deep=deep)
        mapping["__line__"] = line_info
        return mapping


def load_file(path: str) -> Any:
    with open(path) as file:
        o = yaml.load(file, Loader=LineNumberLoader)
    if isinstance(o, dict):
        o["__fullpath__"] = os.path.abspath(path)
    return o


def load_string(body: str) -> Any:
    return yaml.load(io.StringIO(body), Loader=LineNumberLoader)
