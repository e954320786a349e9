# sim/hooks.py
from typing import Protocol


class GridHooks(Protocol):
    def grid_built(self, *, bounds, nodes, seed): ...
    def node_added(self, node): ...
    def query(self, *, query, k, results): ...
    def input_rejected(self, *, line: str, reason: str): ...


class NoopHooks:
    def grid_built(self, **_):
        pass

    def node_added(self, *_, **__):
        pass

    def query(self, **_):
        pass

    def input_rejected(self, **_):
        pass
