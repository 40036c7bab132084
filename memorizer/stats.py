class MemorizerStats:
    def __init__(self):
        self.hits = 0
        self.misses = 0
        # computations which raised. these are counted as misses as well
        self.failures = 0

    @property
    def calls(self) -> int:
        return self.hits + self.misses

    def print_stats(self, name: str = "memorizer"):
        print("%s: %d calls, %d hits, %d misses, %d failures" %
              (name, self.calls, self.hits, self.misses, self.failures))
