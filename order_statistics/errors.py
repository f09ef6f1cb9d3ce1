class SelectionInvariantError(RuntimeError):
    def __init__(self, k: int, n: int) -> None:
        super().__init__(f"Quick select exhausted the window without finding rank {k} of {n}")


class InvalidResultError(Exception):
    def __init__(self, name: str, policy: str) -> None:
        super().__init__(f"Invalid result from {name} ({policy})")
