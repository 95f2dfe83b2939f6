from __future__ import annotations

from _infra import FakeSite, banner, run

from asyncro import StepPhase, series_w


async def main() -> None:
    banner("02_traced_series: eager vs one-at-a-time series")

    site = FakeSite(name="site", delay_seconds=0.02, pages={"/a": "A", "/b": "B", "/c": "C"})
    tasks = {path: (lambda path=path: site.fetch(path)) for path in site.pages}

    for eager in (True, False):
        wr = await series_w(tasks, eager=eager)()
        print(f"eager={eager}")
        print(f"  started: {wr.log.keys(StepPhase.STARTED)}")
        print(f"  trace:   {[(e.key, e.phase.value) for e in wr.log]}")
        print(f"  result:  {sorted(wr.result.unwrap())}")


if __name__ == "__main__":
    run(main)
