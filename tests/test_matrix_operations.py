import pytest

from tensordrill.backend import BackendType, Device
from tensordrill.exercise import ExerciseCategory, ExerciseFramework
from tensordrill.exercises.matrix_operations import (
    BroadcastingExercise,
    MatrixArithmeticExercise,
)


@pytest.fixture
def cpu():
    return Device(BackendType.CPU)


def _tensor(result, name):
    return next(t for t in result.tensors if t.name == name)


def test_matrix_arithmetic_exercise(cpu):
    result = MatrixArithmeticExercise().run(cpu)
    assert result.success
    assert result.output
    assert result.tensors
    assert result.educational_notes


def test_broadcasting_exercise(cpu):
    result = BroadcastingExercise().run(cpu)
    assert result.success
    assert result.output
    assert result.tensors
    assert result.educational_notes


def test_matrix_arithmetic_values(cpu):
    output = MatrixArithmeticExercise().run(cpu).output
    assert "Values: [[3.0, 3.0, 7.0], [7.0, 11.0, 11.0]]" in output
    assert "Values: [[-1.0, 1.0, -1.0], [1.0, -1.0, 1.0]]" in output
    assert "Values: [[11.0, 12.0, 13.0], [14.0, 15.0, 16.0]]" in output
    assert "Values: [5.0, 7.0, 9.0]" in output
    assert "Values: [6.0, 15.0]" in output
    assert "Value: 21.0" in output
    assert "Value: 3.5" in output
    assert "Values: [[0, 1, 0], [1, 0, 1]]" in output
    assert "Values: [[0, 0, 0], [0, 0, 0]]" in output


def test_matrix_arithmetic_tensor_info(cpu):
    result = MatrixArithmeticExercise().run(cpu)
    names = [t.name for t in result.tensors]
    assert names[:2] == ["matrix_a", "matrix_b"]
    assert names[-3:] == ["gt_result", "lt_result", "eq_result"]
    assert _tensor(result, "gt_result").dtype == "u8"
    assert _tensor(result, "sum_all").shape == ()
    assert _tensor(result, "sum_dim1").shape == (2,)
    assert _tensor(result, "broadcast_mul").shape == (2, 3)
    assert result.metrics[0].operation == "matrix_arithmetic_exercise"
    assert result.metrics[0].additional_info["total_operations"] == "15"


def test_broadcasting_values(cpu):
    result = BroadcastingExercise().run(cpu)
    assert "Values: [[6.0, 7.0], [8.0, 9.0]]" in result.output
    assert "Values: [[11.0, 12.0], [23.0, 24.0]]" in result.output
    assert "Values: [[1.0, 4.0, 9.0], [16.0, 25.0, 36.0]]" in result.output
    assert "Large matrix (100x50) + bias (1x50): [100, 50]" in result.output
    assert "Shape: [2, 1, 3]" in result.output
    assert _tensor(result, "biased_matrix").shape == (100, 50)
    assert _tensor(result, "power_result").dtype == "f32"
    assert result.metrics[0].operation == "broadcasting_exercise"


def test_run_through_framework_adds_timing_metric(cpu):
    framework = ExerciseFramework()
    category = ExerciseCategory("Matrix Operations", "Linear algebra")
    category.add_exercise(MatrixArithmeticExercise())
    category.add_exercise(BroadcastingExercise())
    framework.add_category(category)

    assert framework.list_exercises("Matrix Operations") == [
        "Matrix Arithmetic Operations",
        "Broadcasting Demonstrations",
    ]
    result = framework.run_exercise(
        "Matrix Operations", "Matrix Arithmetic Operations", cpu
    )
    assert len(result.metrics) == 2
    assert result.metrics[-1].operation == "Exercise: Matrix Arithmetic Operations"
    assert result.metrics[-1].additional_info == {"category": "Matrix Operations"}