import logging
import sys
from typing import Optional, Protocol, TextIO

from ..config import ReporterConfig
from ..utils.artifacts import prepare_outfile

log = logging.getLogger(__name__)

class Sink(Protocol):
    def write(self, msg: str) -> None: ...

class StreamSink:
    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def write(self, msg: str) -> None:
        # resolved per write so pytest's capsys and similar stdout swaps are honored
        stream = sys.stdout if self.stream is None else self.stream
        stream.write(msg)
        stream.flush()

class FileSink:
    """Appends every write to ``path``; the file is opened and closed per write."""
    def __init__(self, path: str):
        self.path = prepare_outfile(path)
        log.info("Writing TAP output to %s", self.path)

    def write(self, msg: str) -> None:
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(msg)

def make_sink(config: Optional[ReporterConfig] = None) -> Sink:
    if config is not None and config.outfile:
        return FileSink(config.outfile)
    return StreamSink()
