from typing import List, Optional


class ErrorCounter:
    def __init__(self, source: Optional[str] = None):
        # file name used as prefix of the printed messages
        self.source = source
        self.error_count = 0
        self.error_messages: List[str] = []

    def record(self, message: str):
        self.error_count += 1
        self.error_messages.append(message)

    def record_at(self, line: Optional[int], key: str, message: str):
        if line is None:
            self.record("@%s: %s" % (key, message))
        else:
            self.record("line %d: @%s: %s" % (line, key, message))

    def print_errors(self):
        prefix = "" if self.source is None else self.source + ": "
        print("%stotal %d errors are found in memorizer configuration." %
              (prefix, self.error_count))
        for message in self.error_messages:
            print(message)
