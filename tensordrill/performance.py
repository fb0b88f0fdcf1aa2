"""Collecting operation timings and summarising them."""

from __future__ import annotations

import dataclasses
import sys
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, TypeVar

from tensordrill.backend import BackendType
from tensordrill.exercise import Metric

_T = TypeVar("_T")

_NS_PER_SECOND = 1_000_000_000.0


@dataclass
class OperationStats:
    """Summary statistics for one operation, with times in nanoseconds."""

    operation: str
    count: int
    total_time_ns: float
    avg_time_ns: float
    min_time_ns: float
    max_time_ns: float
    backend: BackendType

    def display(self) -> None:
        """Print the statistics."""
        print(f"📊 Statistics for '{self.operation}':")
        print(f"   Backend: {self.backend}")
        print(f"   Executions: {self.count}")
        print(f"   Average Time: {self.avg_time_ns:.2f}ns")
        print(f"   Min Time: {self.min_time_ns:.2f}ns")
        print(f"   Max Time: {self.max_time_ns:.2f}ns")
        print(f"   Total Time: {self.total_time_ns:.2f}ns")
        print()


def _summarise(durations: list[float]) -> tuple[float, float, float, float]:
    """Return total, average, minimum and maximum of non-empty durations."""
    total = sum(durations)
    average = total / len(durations)
    minimum = min(durations, default=float("inf"))
    maximum = max(durations, default=0.0)
    return total, average, minimum, max(maximum, 0.0)


class PerformanceMonitor:
    """Records timings of operations run on one backend."""

    def __init__(self, backend_type: BackendType) -> None:
        self.backend_type = backend_type
        self.metrics: list[Metric] = []
        self._start_ns: int | None = None
        self._current_operation: str | None = None

    def start_timing(self, operation: str) -> None:
        """Begin timing an operation."""
        self._start_ns = time.perf_counter_ns()
        self._current_operation = operation

    def end_timing(self) -> int:
        """Stop timing, record a metric and return the elapsed nanoseconds.

        Without a preceding start_timing a warning is written to stderr,
        nothing is recorded and 0 is returned.
        """
        start, operation = self._start_ns, self._current_operation
        self._start_ns = None
        self._current_operation = None
        if start is None or operation is None:
            print("Warning: end_timing called without start_timing", file=sys.stderr)
            return 0

        duration_ns = time.perf_counter_ns() - start
        self.metrics.append(
            Metric(
                operation=operation,
                duration_ns=duration_ns,
                backend=str(self.backend_type),
            )
        )
        return duration_ns

    def record_metric(self, metric: Metric) -> None:
        """Record a metric, stamping it with this monitor's backend."""
        self.metrics.append(dataclasses.replace(metric, backend=str(self.backend_type)))

    def clear_metrics(self) -> None:
        self.metrics.clear()

    def display_metrics(self) -> None:
        """Print every recorded metric, grouped by operation."""
        if not self.metrics:
            print("📊 No performance metrics recorded yet.")
            return

        print("📊 Performance Metrics Summary:")
        print(f"   Backend: {self.backend_type}")
        print(f"   Total Operations: {len(self.metrics)}")
        print()

        groups: dict[str, list[Metric]] = {}
        for metric in self.metrics:
            groups.setdefault(metric.operation, []).append(metric)

        for operation, metrics in groups.items():
            total, average, minimum, maximum = _summarise(
                [float(m.duration_ns) for m in metrics]
            )
            print(f"   🔧 {operation}:")
            print(f"      Executions: {len(metrics)}")
            print(f"      Average: {average:.2f}ns")
            print(f"      Min: {minimum:.2f}ns")
            print(f"      Max: {maximum:.2f}ns")
            print(f"      Total: {total:.2f}ns")
            extra = metrics[0].additional_info
            if extra:
                print("      Additional Info:")
                for key, value in extra.items():
                    print(f"        {key}: {value}")
            print()

    def compare_backends(self, operation: str) -> list[Metric]:
        """Return every metric recorded for an operation."""
        return [m for m in self.metrics if m.operation == operation]

    def operation_stats(self, operation: str) -> OperationStats | None:
        """Return statistics for an operation, or None if it was never recorded."""
        durations = [float(m.duration_ns) for m in self.compare_backends(operation)]
        if not durations:
            return None
        total, average, minimum, maximum = _summarise(durations)
        return OperationStats(
            operation=operation,
            count=len(durations),
            total_time_ns=total,
            avg_time_ns=average,
            min_time_ns=minimum,
            max_time_ns=maximum,
            backend=self.backend_type,
        )

    def throughput(self, operation: str) -> float | None:
        """Return operations per second, or None without data or elapsed time."""
        stats = self.operation_stats(operation)
        if stats is None or stats.total_time_ns <= 0.0:
            return None
        return stats.count / (stats.total_time_ns / _NS_PER_SECOND)

    def display_comparison(self, operations: Iterable[str]) -> None:
        """Print average time, count and throughput for each operation."""
        print("📈 Performance Comparison:")
        print(f"   Backend: {self.backend_type}")
        print()

        for operation in operations:
            stats = self.operation_stats(operation)
            if stats is None:
                print(f"   🔧 {operation}: No data available")
                print()
                continue
            print(f"   🔧 {operation}:")
            print(f"      Average: {stats.avg_time_ns:.2f}ns")
            print(f"      Executions: {stats.count}")
            rate = self.throughput(operation)
            if rate is not None:
                print(f"      Throughput: {rate:.2f} ops/sec")
            print()

    def time_operation(
        self, operation: str, func: Callable[..., _T], *args: Any, **kwargs: Any
    ) -> tuple[_T, int]:
        """Call func under a timer; return its result and the elapsed nanoseconds."""
        self.start_timing(operation)
        result = func(*args, **kwargs)
        duration_ns = self.end_timing()
        return result, duration_ns