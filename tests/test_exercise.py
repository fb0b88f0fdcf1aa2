import numpy as np
import pytest

from tensordrill.backend import BackendType, Device
from tensordrill.exercise import (
    Exercise,
    ExerciseCategory,
    ExerciseFramework,
    ExerciseNotFoundError,
    ExerciseResult,
    Metric,
    TensorInfo,
)


class MockExercise(Exercise):
    def __init__(self, name, description, should_fail):
        self.name = name
        self.description = description
        self.should_fail = should_fail

    def run(self, device):
        result = ExerciseResult()
        if self.should_fail:
            result.set_error("Mock exercise failure")
            return result
        result.add_output("Mock exercise completed successfully")
        tensor = np.array([1.0, 2.0, 3.0], dtype=np.float32)
        result.add_tensor(TensorInfo.from_tensor("test_tensor", tensor))
        result.add_educational_note("This is a mock exercise for testing")
        return result


@pytest.fixture
def framework():
    fw = ExerciseFramework()
    category = ExerciseCategory("Test Category", "A test category")
    category.add_exercise(MockExercise("Success Exercise", "Should succeed", False))
    category.add_exercise(MockExercise("Fail Exercise", "Should fail", True))
    fw.add_category(category)
    return fw


def test_exercise_result_creation():
    result = ExerciseResult()
    assert result.success
    assert result.output == ""
    assert result.tensors == []
    assert result.metrics == []
    assert result.educational_notes == []

    result.add_output("Test output")
    assert result.output == "Test output"

    result.add_output("More output")
    assert result.output == "Test output\nMore output"


def test_exercise_result_error():
    result = ExerciseResult()
    result.set_error("Test error")
    assert result.success is False
    assert "❌ Error: Test error" in result.output


def test_exercise_category():
    category = ExerciseCategory("Test Category", "A test category")
    assert category.name == "Test Category"
    assert category.description == "A test category"
    assert category.exercises == []

    category.add_exercise(MockExercise("Test Exercise", "A test exercise", False))
    assert len(category.exercises) == 1
    assert category.list_exercises() == ["Test Exercise"]

    found = category.get_exercise("Test Exercise")
    assert found.name == "Test Exercise"
    assert category.get_exercise("Nonexistent") is None


def test_exercise_framework():
    fw = ExerciseFramework()
    assert fw.categories == []

    category = ExerciseCategory("Test Category", "A test category")
    category.add_exercise(MockExercise("Exercise 1", "First exercise", False))
    category.add_exercise(MockExercise("Exercise 2", "Second exercise", False))
    fw.add_category(category)

    assert fw.list_categories() == ["Test Category"]
    assert fw.list_exercises("Test Category") == ["Exercise 1", "Exercise 2"]
    assert fw.get_category("Test Category") is category
    assert fw.get_category("Invalid Category") is None

    with pytest.raises(ExerciseNotFoundError):
        fw.list_exercises("Invalid Category")


def test_successful_exercise_execution(framework):
    result = framework.run_exercise("Test Category", "Success Exercise", Device())
    assert result.success
    assert "Mock exercise completed successfully" in result.output
    assert len(result.tensors) == 1
    assert len(result.educational_notes) == 1
    assert len(result.metrics) == 1
    metric = result.metrics[0]
    assert metric.operation == "Exercise: Success Exercise"
    assert metric.backend == "CPU"
    assert metric.additional_info == {"category": "Test Category"}
    assert metric.duration_ns >= 0


def test_failing_exercise_execution(framework):
    result = framework.run_exercise("Test Category", "Fail Exercise", Device())
    assert result.success is False
    assert "❌ Error: Mock exercise failure" in result.output


def test_run_invalid_category(framework):
    with pytest.raises(ExerciseNotFoundError, match="Category 'Invalid Category' not found"):
        framework.run_exercise("Invalid Category", "Exercise", Device())


def test_run_invalid_exercise(framework):
    with pytest.raises(ExerciseNotFoundError, match="Exercise 'Invalid Exercise' not found"):
        framework.run_exercise("Test Category", "Invalid Exercise", Device())


def test_tensor_info():
    tensor = np.array([[1.0, 2.0], [3.0, 4.0]], dtype=np.float32)
    info = TensorInfo.from_tensor("test", tensor)
    assert info.name == "test"
    assert info.shape == (2, 2)
    assert info.dtype == "f32"
    assert info.sample_values == "Tensor[dims 2, 2; f32]"


@pytest.mark.parametrize(
    "dtype, name",
    [
        (np.float64, "f64"),
        (np.int64, "i64"),
        (np.uint32, "u32"),
        (np.uint8, "u8"),
        (np.bool_, "u8"),
    ],
)
def test_tensor_info_dtype_names(dtype, name):
    info = TensorInfo.from_tensor("t", np.zeros(3, dtype=dtype))
    assert info.dtype == name
    assert info.shape == (3,)


def test_tensor_info_unsupported_dtype():
    with pytest.raises(TypeError):
        TensorInfo.from_tensor("t", np.zeros(2, dtype=np.complex64))


def test_tensor_info_scalar():
    info = TensorInfo.from_tensor("s", np.float32(42.0))
    assert info.shape == ()
    assert info.sample_values == "Tensor[42.0; f32]"


def test_metric_creation():
    metric = Metric(
        operation="Test Operation",
        duration_ns=100_000_000,
        backend="CPU",
        additional_info={"test_key": "test_value"},
    )
    assert metric.operation == "Test Operation"
    assert metric.duration_ns // 1_000_000 == 100
    assert metric.backend == "CPU"
    assert metric.additional_info.get("test_key") == "test_value"


def test_result_display(capsys):
    result = ExerciseResult()
    result.add_output("line one")
    result.add_output("line two")
    result.add_tensor(TensorInfo.from_tensor("x", np.ones((2, 3), dtype=np.float32)))
    result.add_metric(Metric("op", 1500, "CPU"))
    result.add_educational_note("a note")
    result.display()
    out = capsys.readouterr().out
    assert "   Status: ✅ Success" in out
    assert "     line one\n     line two" in out
    assert "     x (f32): [2, 3] - Tensor[dims 2, 3; f32]" in out
    assert "     op: 1500ns (CPU)" in out
    assert "     • a note" in out


def test_display_menu_and_category(framework, capsys):
    framework.display_menu()
    framework.display_category_exercises("Test Category")
    out = capsys.readouterr().out
    assert "   1. Test Category - A test category" in out
    assert "   1. Success Exercise - Should succeed" in out
    assert "   2. Fail Exercise - Should fail" in out


def test_display_category_missing(framework):
    with pytest.raises(ExerciseNotFoundError):
        framework.display_category_exercises("Nope")


def test_device_default_is_cpu():
    assert Device().backend is BackendType.CPU