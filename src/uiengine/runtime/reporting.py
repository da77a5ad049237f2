"""Reporting sinks: how the engine hands messages to its host."""

import asyncio
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol


class ReportKind(str, Enum):
    """Report severity."""

    INFO = "info"
    ERROR = "error"


@dataclass(frozen=True)
class Report:
    """One message from the engine."""

    kind: ReportKind
    message: Any


class ReportSink(Protocol):
    """Anything callable as ``report(message, kind)``."""

    def __call__(self, message: Any, kind: str = ReportKind.INFO) -> None:
        ...


class ReportLog:
    """Sink that retains every report in arrival order."""

    def __init__(self) -> None:
        self.entries: list[Report] = []

    def __call__(self, message: Any, kind: str = ReportKind.INFO) -> None:
        self.entries.append(Report(ReportKind(kind), message))

    @property
    def infos(self) -> list[Any]:
        return [r.message for r in self.entries if r.kind is ReportKind.INFO]

    @property
    def errors(self) -> list[Any]:
        return [r.message for r in self.entries if r.kind is ReportKind.ERROR]

    def clear(self) -> None:
        self.entries.clear()

    def __len__(self) -> int:
        return len(self.entries)


class ReportChannel:
    """Sink that forwards reports over an asyncio queue to a consumer task."""

    def __init__(self, maxsize: int = 0) -> None:
        self._queue: asyncio.Queue[Report] = asyncio.Queue(maxsize=maxsize)

    def __call__(self, message: Any, kind: str = ReportKind.INFO) -> None:
        self._queue.put_nowait(Report(ReportKind(kind), message))

    async def get(self) -> Report:
        return await self._queue.get()

    def get_nowait(self) -> Report:
        return self._queue.get_nowait()

    def empty(self) -> bool:
        return self._queue.empty()
