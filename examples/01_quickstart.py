from __future__ import annotations

from _infra import FakeSite, Page, banner, run

import asyncro
from kungfu import Error, Ok


async def main() -> None:
    banner("01_quickstart: map + filter + reduce + parallel")

    site = FakeSite(
        name="site",
        delay_seconds=0.05,
        pages={"/foo": "foo!", "/bar": "bar!!"},
    )
    paths = ["/foo", "/missing", "/bar"]

    # All three checks run at once: ~50ms, not ~150ms.
    live = await asyncro.filter(paths, site.is_up)
    print(f"live: {live}")

    pages = await asyncro.map(live, site.fetch)
    print(f"bodies: {[page.body for page in pages]}")

    async def total_length(acc: int, page: Page) -> int:
        return acc + len(page.body)

    print(f"total length: {await asyncro.reduce(pages, total_length, 0)}")

    both = await asyncro.parallel({
        "foo": lambda: site.fetch("/foo"),
        "bar": lambda: site.fetch("/bar"),
    })
    print(f"keyed: {sorted(both)}")

    # Result flavor: the step's own exception comes back as Error.
    result = await asyncro.map_r(paths, site.fetch)()
    match result:
        case Ok(found):
            print(f"ok: {found}")
        case Error(err):
            print(f"error: {err!r}")


if __name__ == "__main__":
    run(main)
