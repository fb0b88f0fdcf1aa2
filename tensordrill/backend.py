"""Compute backend selection and reporting."""

from __future__ import annotations

import enum
import os
import time
from dataclasses import dataclass

import numpy as np

_BENCHMARK_SIZE = 1000
_BENCHMARK_ITERATIONS = 10


class BackendType(enum.Enum):
    """Kind of compute backend."""

    CUDA = "CUDA"
    METAL = "Metal"
    CPU = "CPU"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Device:
    """A device that tensors live on."""

    backend: BackendType = BackendType.CPU
    ordinal: int = 0


class BackendManager:
    """Picks the best available backend and reports on it.

    Array work is done with numpy, which runs on the CPU, so the CPU
    backend is always the one selected.
    """

    def __init__(self) -> None:
        self.backend_type = BackendType.CPU
        self.device = Device(self.backend_type)
        print("✅ Using CPU backend")

    def backend_info(self) -> str:
        """Return a one-line description of the selected backend."""
        if self.backend_type is BackendType.CUDA:
            return "CUDA (Not Available)"
        if self.backend_type is BackendType.METAL:
            return "Metal (Not Available)"
        return f"CPU ({os.cpu_count() or 1} threads)"

    def benchmark_backend(self) -> float:
        """Time a 1000x1000 matrix multiplication; return the mean in nanoseconds."""
        rng = np.random.default_rng()
        shape = (_BENCHMARK_SIZE, _BENCHMARK_SIZE)
        a = rng.standard_normal(shape, dtype=np.float32)
        b = rng.standard_normal(shape, dtype=np.float32)

        a @ b  # warm up

        start = time.perf_counter_ns()
        for _ in range(_BENCHMARK_ITERATIONS):
            a @ b
        elapsed = time.perf_counter_ns() - start
        return elapsed / _BENCHMARK_ITERATIONS

    def display_status(self) -> None:
        """Print the backend, its details and a benchmark figure."""
        print("🔧 Backend Manager Status:")
        print(f"   Backend: {self.backend_type}")
        print(f"   Details: {self.backend_info()}")
        try:
            time_ns = self.benchmark_backend()
        except Exception as exc:  # report, do not abort the status display
            print(f"   Performance: Benchmark failed - {exc}")
        else:
            print(f"   Performance: {time_ns:.2f} ns (1000x1000 matrix multiplication)")
        print()