import pytest

from tensordrill.backend import Device
from tensordrill.exercises.tensor_shape import TensorShapeExercise


@pytest.fixture
def result():
    return TensorShapeExercise().run(Device())


def test_tensor_shape_exercise(result):
    assert result.success
    assert result.output
    assert result.tensors


def test_name_and_description():
    exercise = TensorShapeExercise()
    assert exercise.name == "Tensor Shape Manipulation"
    assert "reshaping" in exercise.description


def test_tensor_shapes(result):
    shapes = {t.name: t.shape for t in result.tensors}
    assert shapes == {
        "reshaped": (3, 2),
        "flattened": (6,),
        "squeezed": (2, 3),
        "unsqueezed": (2, 3, 1),
        "broadcasted": (2, 3),
        "view_reshaped": (6, 1),
    }
    assert all(t.dtype == "f32" for t in result.tensors)


def test_output_values(result):
    output = result.output
    assert "   Values: [[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]]" in output
    assert "   Values: [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]" in output
    assert "   Values: [[1.0, 2.0, 3.0], [1.0, 2.0, 3.0]]" in output
    assert "   Values: [[1.0], [2.0], [3.0], [4.0], [5.0], [6.0]]" in output
    assert "   New shape: [3, 2]" in output
    assert "with shape [1, 2, 3]" in output
    assert "with shape [1, 2, 3, ]" not in output


def test_squeeze_and_unsqueeze_lines(result):
    lines = result.output.splitlines()
    squeeze = next(line for line in lines if line.startswith("   After squeeze(0)"))
    assert squeeze.endswith("with shape [2, 3]")
    unsqueeze = next(line for line in lines if line.startswith("   After unsqueeze(0)"))
    assert unsqueeze.endswith("with shape [1, 2, 3]")


def test_educational_notes(result):
    assert len(result.educational_notes) == 2
    assert "squeeze" in result.educational_notes[1]


def test_metric(result):
    assert len(result.metrics) == 1
    metric = result.metrics[0]
    assert metric.operation == "tensor_shape_exercise"
    assert metric.duration_ns == 0
    assert metric.additional_info == {"total_operations": "6"}