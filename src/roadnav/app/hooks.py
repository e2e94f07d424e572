# app/hooks.py
from typing import Protocol


class NavHooks(Protocol):
    def build_start(self, *, source: str): ...
    def build_end(self, *, nodes: int, ways: int, routable: int, names: int, wall_ms: float): ...
    def query(self, op: str, *, ms: float, **kw): ...
    def error(self, op: str, *, exc: BaseException, **kw): ...


class NoopHooks:
    def build_start(self, **_):
        pass

    def build_end(self, **_):
        pass

    def query(self, *_, **__):
        pass

    def error(self, *_, **__):
        pass
