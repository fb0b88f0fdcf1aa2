"""Exercise results, exercise categories and the framework that runs them."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

import numpy as np

from tensordrill.backend import Device

_DTYPE_NAMES = {
    np.dtype(np.bool_): "u8",
    np.dtype(np.uint8): "u8",
    np.dtype(np.uint32): "u32",
    np.dtype(np.int64): "i64",
    np.dtype(np.float16): "f16",
    np.dtype(np.float32): "f32",
    np.dtype(np.float64): "f64",
}


def _dtype_name(dtype: np.dtype) -> str:
    try:
        return _DTYPE_NAMES[np.dtype(dtype)]
    except KeyError:
        raise TypeError(f"unsupported tensor dtype: {dtype}") from None


def _summary(array: np.ndarray, dtype_name: str) -> str:
    if array.ndim == 0:
        return f"Tensor[{array.item()}; {dtype_name}]"
    dims = ", ".join(str(d) for d in array.shape)
    return f"Tensor[dims {dims}; {dtype_name}]"


@dataclass
class TensorInfo:
    """Description of a tensor for display."""

    name: str
    shape: tuple[int, ...]
    dtype: str
    sample_values: str

    @classmethod
    def from_tensor(cls, name: str, tensor) -> TensorInfo:
        """Describe an array; raise TypeError for an unsupported dtype."""
        array = np.asarray(tensor)
        dtype = _dtype_name(array.dtype)
        return cls(
            name=name,
            shape=tuple(int(d) for d in array.shape),
            dtype=dtype,
            sample_values=_summary(array, dtype),
        )


@dataclass
class Metric:
    """Timing of one operation."""

    operation: str
    duration_ns: int
    backend: str
    additional_info: dict[str, str] = field(default_factory=dict)


@dataclass
class ExerciseResult:
    """What an exercise produced."""

    success: bool = True
    output: str = ""
    tensors: list[TensorInfo] = field(default_factory=list)
    metrics: list[Metric] = field(default_factory=list)
    educational_notes: list[str] = field(default_factory=list)

    def add_output(self, text: str) -> None:
        """Append text, starting a new line if there is output already."""
        self.output = f"{self.output}\n{text}" if self.output else text

    def add_tensor(self, tensor_info: TensorInfo) -> None:
        self.tensors.append(tensor_info)

    def add_metric(self, metric: Metric) -> None:
        self.metrics.append(metric)

    def add_educational_note(self, note: str) -> None:
        self.educational_notes.append(note)

    def set_error(self, error: str) -> None:
        """Mark the result as failed and record the error in the output."""
        self.success = False
        self.add_output(f"❌ Error: {error}")

    def display(self) -> None:
        """Print the result."""
        print("📊 Exercise Results:")
        print(f"   Status: {'✅ Success' if self.success else '❌ Failed'}")

        if self.output:
            print("   Output:")
            for line in self.output.splitlines():
                print(f"     {line}")

        if self.tensors:
            print("   Tensors:")
            for tensor in self.tensors:
                print(
                    f"     {tensor.name} ({tensor.dtype}): "
                    f"{list(tensor.shape)} - {tensor.sample_values}"
                )

        if self.metrics:
            print("   Performance:")
            for metric in self.metrics:
                print(f"     {metric.operation}: {metric.duration_ns}ns ({metric.backend})")

        if self.educational_notes:
            print("   📚 Educational Notes:")
            for note in self.educational_notes:
                print(f"     • {note}")
        print()


class Exercise(ABC):
    """An exercise with a name and a description that can be run on a device."""

    name: str
    description: str

    @abstractmethod
    def run(self, device: Device) -> ExerciseResult:
        """Run the exercise and return what it produced."""


@dataclass
class ExerciseCategory:
    """A named group of related exercises."""

    name: str
    description: str
    exercises: list[Exercise] = field(default_factory=list)

    def add_exercise(self, exercise: Exercise) -> None:
        self.exercises.append(exercise)

    def list_exercises(self) -> list[str]:
        return [exercise.name for exercise in self.exercises]

    def get_exercise(self, name: str) -> Exercise | None:
        return next((e for e in self.exercises if e.name == name), None)


class ExerciseNotFoundError(LookupError):
    """Raised when a category or exercise does not exist."""


class ExerciseFramework:
    """Holds categories of exercises and runs them."""

    def __init__(self) -> None:
        self.categories: list[ExerciseCategory] = []

    def add_category(self, category: ExerciseCategory) -> None:
        self.categories.append(category)

    def list_categories(self) -> list[str]:
        return [category.name for category in self.categories]

    def get_category(self, name: str) -> ExerciseCategory | None:
        return next((c for c in self.categories if c.name == name), None)

    def _require_category(self, name: str) -> ExerciseCategory:
        category = self.get_category(name)
        if category is None:
            raise ExerciseNotFoundError(f"Category '{name}' not found")
        return category

    def list_exercises(self, category_name: str) -> list[str]:
        return self._require_category(category_name).list_exercises()

    def run_exercise(
        self, category_name: str, exercise_name: str, device: Device
    ) -> ExerciseResult:
        """Run one exercise and append a timing metric to its result."""
        category = self._require_category(category_name)
        exercise = category.get_exercise(exercise_name)
        if exercise is None:
            raise ExerciseNotFoundError(
                f"Exercise '{exercise_name}' not found in category '{category_name}'"
            )

        print(f"🏃 Running exercise: {exercise.name} - {exercise.description}")

        start = time.perf_counter_ns()
        result = exercise.run(device)
        duration_ns = time.perf_counter_ns() - start

        result.add_metric(
            Metric(
                operation=f"Exercise: {exercise.name}",
                duration_ns=duration_ns,
                backend=str(device.backend),
                additional_info={"category": category_name},
            )
        )
        return result

    def display_menu(self) -> None:
        print("📚 Available Exercise Categories:")
        for number, category in enumerate(self.categories, start=1):
            print(f"   {number}. {category.name} - {category.description}")
        print()

    def display_category_exercises(self, category_name: str) -> None:
        category = self._require_category(category_name)
        print(f"📋 Exercises in '{category.name}':")
        for number, exercise in enumerate(category.exercises, start=1):
            print(f"   {number}. {exercise.name} - {exercise.description}")
        print()