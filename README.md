# tensordrill

A small collection of guided tensor exercises built on numpy. Each exercise
builds arrays, transforms them step by step, and returns an `ExerciseResult`
holding a text walkthrough, descriptions of the tensors it produced, timing
metrics and short educational notes.

## Installing

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Running the demo

```
tensordrill
```

The command (`tensordrill.cli:main`) takes no options besides `--help`. It:

1. selects the backend and prints its status, including the mean time of a
   1000x1000 float32 matrix multiplication over ten runs;
2. times a few tensor operations (creation, conversion to a list, transpose,
   matrix multiplication) with a `PerformanceMonitor`;
3. builds the exercise catalogue and prints its categories;
4. prints a summary of the recorded timings and a comparison of
   `tensor_creation`, `tensor_transpose` and `matrix_multiplication`;
5. runs the "Matrix Arithmetic Operations" exercise and prints the first ten
   lines of its output, with counts of its tensors and notes.

## Exercise catalogue

`tensordrill.cli.build_framework()` returns an `ExerciseFramework` with three
categories:

- **Basic Tensors**: "Tensor Creation", "Tensor From Data Sources",
  "Tensor Indexing and Slicing", "Advanced Tensor Slicing Patterns",
  "Tensor Shape Manipulation".
- **Matrix Operations**: "Matrix Arithmetic Operations",
  "Broadcasting Demonstrations".
- **Neural Networks**: an empty category; it holds no exercises.

The exercise classes live in `tensordrill.exercises.tensor_creation`,
`tensordrill.exercises.tensor_indexing`, `tensordrill.exercises.tensor_shape`
and `tensordrill.exercises.matrix_operations`.

## Using it from Python

```python
from tensordrill.backend import BackendManager
from tensordrill.cli import build_framework

manager = BackendManager()
framework = build_framework()

print(framework.list_categories())
print(framework.list_exercises("Basic Tensors"))

result = framework.run_exercise(
    "Matrix Operations", "Matrix Arithmetic Operations", manager.device
)
result.display()
```

`run_exercise` appends a metric named `"Exercise: <name>"` with the run time
in nanoseconds and the category in `additional_info`. Asking for an unknown
category or exercise raises `ExerciseNotFoundError` (a `LookupError`);
`get_category` and `ExerciseCategory.get_exercise` return `None` instead.

`TensorInfo.from_tensor(name, array)` describes a numpy array by name, shape,
dtype (`u8`, `u32`, `i64`, `f16`, `f32`, `f64`) and a short summary; other
dtypes raise `TypeError`.

### Timing your own operations

```python
from tensordrill.backend import BackendType
from tensordrill.performance import PerformanceMonitor

monitor = PerformanceMonitor(BackendType.CPU)
value, elapsed_ns = monitor.time_operation("sum", sum, range(1000))

monitor.display_metrics()
stats = monitor.operation_stats("sum")
print(stats.count, stats.avg_time_ns)
print(monitor.throughput("sum"))
```

All durations are in nanoseconds. `start_timing` / `end_timing` can be used
directly; calling `end_timing` without `start_timing` writes a warning to
stderr, records nothing and returns 0. `record_metric` stamps each metric with
the monitor's backend. `operation_stats` and `throughput` return `None` for an
operation with no recorded data.

### Writing an exercise

Subclass `Exercise`, give it a `name` and `description`, and implement
`run(device)` to return an `ExerciseResult`:

```python
from tensordrill.exercise import Exercise, ExerciseCategory, ExerciseResult

class Hello(Exercise):
    name = "Hello"
    description = "A tiny exercise"

    def run(self, device):
        result = ExerciseResult()
        result.add_output("hello")
        result.add_educational_note("Exercises return an ExerciseResult.")
        return result

category = ExerciseCategory("Custom", "My own exercises")
category.add_exercise(Hello())
```

## What it does not do

- All array work runs on the CPU through numpy. `BackendType` names CUDA and
  Metal, but `BackendManager` always selects the CPU backend; there is no GPU
  support.
- The demo command is not interactive: it runs its fixed tour once and exits.
  There is no way to pick an exercise from the command line.
- The "Neural Networks" category contains no exercises.