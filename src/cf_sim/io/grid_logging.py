# io/grid_logging.py
import json
import logging
import sys

from cf_sim.app.events import FacilityOpened, QueryAnswered, QueryMatch
from cf_sim.io.recorder import Recorder
from cf_sim.sim.hooks import NoopHooks


def _default_json_logger(name="cf_sim", level="WARNING", stream=None):
    logger = logging.getLogger(name)
    if not logger.handlers:
        # stderr keeps the console session on stdout readable
        h = logging.StreamHandler(stream or sys.stderr)

        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload = {
                    "level": record.levelname,
                    "msg": record.getMessage(),
                    "logger": record.name,
                }
                extra = getattr(record, "extra", None)
                if isinstance(extra, dict):
                    payload.update(extra)
                return json.dumps(payload)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
    logger.setLevel(level)
    return logger


class GridLogging(NoopHooks):
    """
    Structured logs for grid construction and queries, plus business events
    forwarded to an optional Recorder.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "WARNING",
        debug: bool = False,
        logger: logging.Logger | None = None,
        recorder: Recorder | None = None,
    ):
        self.run_id, self.debug, self.recorder = run_id, debug, recorder
        self.log = logger or _default_json_logger(level=level)
        self.queries = 0

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id, **extra}
        self.log.log(getattr(logging, level), msg, extra={"extra": payload})

    # ------------- construction --------------------------

    def grid_built(self, *, bounds, nodes, seed):
        self._emit(
            "INFO",
            "grid_built",
            bounds=[bounds.x_min, bounds.x_max, bounds.y_min, bounds.y_max],
            nodes=nodes,
            seed=seed,
        )

    def node_added(self, node):
        for f in node.facilities:
            if self.debug:
                self._emit("DEBUG", "facility_opened", facility_id=f.id, x=node.x, y=node.y)
            self.biz(
                FacilityOpened(
                    facility_id=f.id,
                    x=node.x,
                    y=node.y,
                    prices={k.value: p for k, p in f.prices.items()},
                )
            )

    # ------------- queries --------------------------

    def query(self, *, query, k, results):
        self.queries += 1
        self._emit(
            "INFO", "query", x=query.x, y=query.y, k=k, returned=len(results), seq=self.queries
        )
        matches = []
        for r in results:
            for f in r.node.facilities:
                kind, price = f.cheapest()
                matches.append(QueryMatch(f.id, kind.value, price, r.distance))
        self.biz(QueryAnswered(x=query.x, y=query.y, k=k, matches=matches))

    def input_rejected(self, *, line: str, reason: str):
        self._emit("WARNING", "input_rejected", line=line, reason=reason)

    # ------------- Business Event Reporting --------------------------

    def biz(self, ev):
        if self.recorder:
            self.recorder.emit(ev)
