from __future__ import annotations

import asyncio
import sys
from collections.abc import Callable, Coroutine
from dataclasses import dataclass, field
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class Failure(Exception):
    message: str

    def __str__(self) -> str:  # pragma: no cover (examples only)
        return self.message


@dataclass(frozen=True, slots=True)
class Page:
    path: str
    body: str


def _no_pages() -> dict[str, str]:
    return {}


@dataclass(slots=True)
class FakeSite:
    name: str
    delay_seconds: float = 0.0
    pages: dict[str, str] = field(default_factory=_no_pages)

    async def fetch(self, path: str) -> Page:
        await asyncio.sleep(self.delay_seconds)
        body = self.pages.get(path)
        if body is None:
            raise Failure(f"{self.name}: {path} not found")
        return Page(path=path, body=body)

    async def is_up(self, path: str) -> bool:
        await asyncio.sleep(self.delay_seconds)
        return path in self.pages


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())
