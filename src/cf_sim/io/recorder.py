# io/recorder.py
import json
import logging
import sys
from dataclasses import asdict
from typing import Protocol

log = logging.getLogger("cf_sim.recorder")


class Sink(Protocol):
    def write(self, ev) -> None: ...


class JsonlSink:
    def __init__(self, fp=None):
        self.fp = fp  # None => current sys.stderr, away from the console session

    def write(self, ev) -> None:
        line = json.dumps({"event": type(ev).__name__, **asdict(ev)})
        (self.fp or sys.stderr).write(line + "\n")


class MemorySink:
    def __init__(self):
        self.events: list = []

    def write(self, ev) -> None:
        self.events.append(ev)


class Recorder:
    def __init__(self, *sinks: Sink):
        self.sinks = sinks or (JsonlSink(),)

    def emit(self, ev):
        for s in self.sinks:
            try:
                s.write(ev)
            except Exception:
                # a broken sink must not end the console session
                log.exception("sink %s failed on %s", type(s).__name__, type(ev).__name__)
