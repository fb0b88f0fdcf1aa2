"""Command-line entry point: a guided tour of tensor operations."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

import numpy as np

from tensordrill.backend import BackendManager
from tensordrill.exercise import ExerciseCategory, ExerciseFramework
from tensordrill.exercises.matrix_operations import (
    BroadcastingExercise,
    MatrixArithmeticExercise,
)
from tensordrill.exercises.tensor_creation import (
    TensorCreationExercise,
    TensorFromDataExercise,
    _format_values,
    _tensor_repr,
)
from tensordrill.exercises.tensor_indexing import (
    TensorIndexingExercise,
    TensorSlicingPatternsExercise,
)
from tensordrill.exercises.tensor_shape import TensorShapeExercise
from tensordrill.performance import PerformanceMonitor

_PREVIEW_LINES = 10
_DEMO_CATEGORY = "Matrix Operations"
_DEMO_EXERCISE = "Matrix Arithmetic Operations"
_COMPARED_OPERATIONS = ("tensor_creation", "tensor_transpose", "matrix_multiplication")


def build_framework() -> ExerciseFramework:
    """Return a framework holding every exercise category."""
    framework = ExerciseFramework()

    basic_tensors = ExerciseCategory(
        "Basic Tensors", "Fundamental tensor creation and manipulation"
    )
    for exercise in (
        TensorCreationExercise(),
        TensorFromDataExercise(),
        TensorIndexingExercise(),
        TensorSlicingPatternsExercise(),
        TensorShapeExercise(),
    ):
        basic_tensors.add_exercise(exercise)

    matrix_ops = ExerciseCategory(
        "Matrix Operations", "Linear algebra operations and transformations"
    )
    matrix_ops.add_exercise(MatrixArithmeticExercise())
    matrix_ops.add_exercise(BroadcastingExercise())

    neural_networks = ExerciseCategory(
        "Neural Networks", "Neural network components and training"
    )

    framework.add_category(basic_tensors)
    framework.add_category(matrix_ops)
    framework.add_category(neural_networks)
    return framework


def _tensor_demo(monitor: PerformanceMonitor) -> None:
    print("📊 Basic Tensor Operations Demo (with Performance Monitoring):")

    tensor, duration = monitor.time_operation(
        "tensor_creation",
        lambda: np.array([1, 2, 3, 4, 5, 6], dtype=np.uint32).reshape(2, 3),
    )
    print(f"   Original tensor (2x3): {_tensor_repr(tensor)} (created in {duration}ns)")

    vec_2d, duration = monitor.time_operation("tensor_to_vec2", tensor.tolist)
    print(f"   As 2D vector: {_format_values(np.asarray(vec_2d, dtype=np.uint32))} "
          f"(converted in {duration}ns)")

    float_tensor, duration = monitor.time_operation(
        "float_tensor_creation",
        lambda: np.array([1.0, 2.0, 3.0, 4.0], dtype=np.float32).reshape(2, 2),
    )
    print(f"   Float tensor (2x2): {_tensor_repr(float_tensor)} (created in {duration}ns)")

    transposed, duration = monitor.time_operation(
        "tensor_transpose", lambda: float_tensor.T
    )
    print(f"   Transposed: {_tensor_repr(transposed)} (transposed in {duration}ns)")

    product, duration = monitor.time_operation(
        "matrix_multiplication", lambda: float_tensor @ transposed
    )
    print(f"   Matrix multiplication result: {_tensor_repr(product)} "
          f"(computed in {duration}ns)")

    print("\n✅ Backend manager working correctly!")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the guided tour and return the exit status."""
    parser = argparse.ArgumentParser(
        prog="tensordrill",
        description="Walk through tensor exercises and report timings.",
    )
    parser.parse_args(argv)

    print("🚀 Tensor Drill Practice Application")
    print("===============================")

    backend_manager = BackendManager()
    backend_manager.display_status()

    monitor = PerformanceMonitor(backend_manager.backend_type)
    device = backend_manager.device

    _tensor_demo(monitor)

    print("🏗️  Initializing Exercise Framework...")
    framework = build_framework()
    framework.display_menu()

    print("✅ Exercise framework initialized successfully!")
    print(f"📚 {len(framework.list_categories())} categories available")

    print("\n🔍 Performance Analysis:")
    monitor.display_metrics()
    monitor.display_comparison(_COMPARED_OPERATIONS)
    print("✅ Performance monitoring system working correctly!")

    print("\n🧪 Running Matrix Arithmetic Exercise Demo:")
    try:
        result = framework.run_exercise(_DEMO_CATEGORY, _DEMO_EXERCISE, device)
    except Exception as exc:  # report and carry on, as the tour is not fatal
        print(f"❌ Failed to run exercise: {exc}")
    else:
        print("✅ Exercise completed successfully!")
        print("📝 Output preview (truncated):")
        lines = result.output.splitlines()
        for line in lines[:_PREVIEW_LINES]:
            print(f"   {line}")
        if len(lines) > _PREVIEW_LINES:
            print("   ... (output truncated)")
        print(f"\n📊 Created {len(result.tensors)} tensors")
        print(f"📚 {len(result.educational_notes)} educational notes")

    print("\nReady to explore more exercises...")
    return 0