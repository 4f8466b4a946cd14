import statistics
import timeit
from collections.abc import Callable
from dataclasses import dataclass
from functools import partial
from typing import Final, NamedTuple, Self

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TaskProgressColumn,
    TextColumn,
    TimeRemainingColumn,
)

import funkchain as fk

type BenchFn = Callable[[], object]


WARMUP_RUNS: Final = 5
CALLS_BY_RUN: Final = 10
TARGET_BENCH_SEC: Final = 1
MIN_RUNS: Final = 20
SIZES: Final = (256, 1024, 4096)

CONSOLE: Final = Console()


class Variant(NamedTuple):
    """A specific benchmark variant size."""

    size: int
    n_runs: int
    fn: BenchFn

    @classmethod
    def from_fn(cls, fn: BenchFn, size: int) -> Self:
        """Estimate number of runs needed for benchmark variant."""
        warmup_time = timeit.timeit(fn, number=WARMUP_RUNS) / WARMUP_RUNS
        est = int(TARGET_BENCH_SEC / 2 / max(warmup_time, 1e-9) / CALLS_BY_RUN)
        return cls(size, max(MIN_RUNS, est), fn)


class Benchmark(NamedTuple):
    """A benchmark with multiple data sizes."""

    category: str
    name: str
    variants: tuple[Variant, ...]


@dataclass(slots=True)
class Row:
    """Median timing of one benchmark variant."""

    category: str
    name: str
    size: int
    runs: int
    median: float


BENCHMARKS: list[Benchmark] = []


def bench[P](
    *, gen: Callable[[fk.Table[int]], P] = lambda table: table
) -> Callable[[Callable[[P], object]], Callable[[P], object]]:
    """Decorator to register benchmarks with multiple data sizes."""

    def decorator(func: Callable[[P], object]) -> Callable[[P], object]:
        variants = fk.wrap(SIZES).map(
            lambda size: Variant.from_fn(
                partial(func, gen(fk.range(0, size - 1))), size
            )
        )
        BENCHMARKS.append(
            Benchmark(func.__qualname__.split(".")[0], func.__name__, variants.inner().array)
        )
        return func

    return decorator


def collect_timings(benchmarks: list[Benchmark]) -> fk.Table[Row]:
    """Run every variant and keep the median time of its runs."""
    total_runs: int = (
        fk.wrap(benchmarks)
        .flat_map(lambda b: [v.n_runs for v in b.variants])
        .fold_left(0)(lambda acc, n: acc + n)
    )
    CONSOLE.print(
        f"Found {len(benchmarks)} benchmarks, {total_runs} total runs",
        style="bold white",
    )

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        TimeRemainingColumn(),
        console=CONSOLE,
    ) as progress:
        task = progress.add_task("[cyan]Running benchmarks...", total=total_runs)
        f = partial(_run_variant, progress, task)
        return fk.Table(
            f(variant, benchmark)
            for benchmark in benchmarks
            for variant in benchmark.variants
        )


def _run_variant(
    progress: Progress,
    task: TaskID,
    variant: Variant,
    bench: Benchmark,
) -> Row:
    progress.update(
        task,
        description=f"[cyan]{bench.category}: {bench.name} @ {variant.size}",
    )

    def _timed_run() -> float:
        time_taken = timeit.timeit(variant.fn, number=CALLS_BY_RUN)
        progress.advance(task)
        return time_taken

    timings = fk.itimes(variant.n_runs, _timed_run).collect()
    return Row(
        bench.category,
        bench.name,
        variant.size,
        variant.n_runs,
        statistics.median(timings.array),
    )
