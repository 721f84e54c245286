"""Reference text sinks: in-memory buffers and a stream writer."""

from __future__ import annotations

import sys
from collections import defaultdict
from typing import TextIO


class BufferedSink:
    """Collects written lines per sink id."""

    def __init__(self):
        self.streams: defaultdict[str, list[str]] = defaultdict(list)

    def write(self, sink_id: str, text: str) -> None:
        self.streams[sink_id].append(text)

    def lines(self, sink_id: str) -> list[str]:
        return list(self.streams.get(sink_id, ()))

    def text(self, sink_id: str) -> str:
        """Contents as an output element would show them: one line per write."""
        return "".join(line + "\n" for line in self.streams.get(sink_id, ()))

    def clear(self) -> None:
        self.streams.clear()


class StreamSink:
    """Writes every line to one text stream, whatever the sink id."""

    def __init__(self, stream: TextIO | None = None, show_ids: bool = False):
        self.stream = stream
        self.show_ids = show_ids

    def write(self, sink_id: str, text: str) -> None:
        stream = self.stream if self.stream is not None else sys.stdout
        if self.show_ids:
            stream.write(f"[{sink_id}] ")
        stream.write(text + "\n")
