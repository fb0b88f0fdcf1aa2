import pytest

from tensordrill.backend import Device
from tensordrill.exercises.tensor_indexing import (
    TensorIndexingExercise,
    TensorSlicingPatternsExercise,
)


@pytest.fixture
def indexing_result():
    return TensorIndexingExercise().run(Device())


@pytest.fixture
def slicing_result():
    return TensorSlicingPatternsExercise().run(Device())


def _tensor(result, name):
    matches = [t for t in result.tensors if t.name == name]
    assert len(matches) == 1
    return matches[0]


def test_tensor_indexing_exercise(indexing_result):
    assert indexing_result.success
    assert indexing_result.output
    assert indexing_result.tensors
    assert indexing_result.educational_notes


def test_tensor_slicing_patterns_exercise(slicing_result):
    assert slicing_result.success
    assert slicing_result.output
    assert slicing_result.tensors
    assert slicing_result.educational_notes


def test_indexing_names():
    assert TensorIndexingExercise.name == "Tensor Indexing and Slicing"
    assert TensorSlicingPatternsExercise().name == "Advanced Tensor Slicing Patterns"


@pytest.mark.parametrize(
    "name, shape",
    [
        ("base_matrix", (3, 4)),
        ("element_1_2", ()),
        ("row_1", (4,)),
        ("col_2", (3,)),
        ("rows_slice", (2, 4)),
        ("cols_slice", (3, 2)),
        ("submatrix", (2, 2)),
        ("slice_0", (3, 4)),
        ("narrow_3d", (1, 2, 2)),
        ("selected_rows", (2, 4)),
        ("last_cols", (3, 2)),
    ],
)
def test_indexing_tensor_shapes(indexing_result, name, shape):
    info = _tensor(indexing_result, name)
    assert info.shape == shape
    assert info.dtype == "f32"


def test_indexing_values(indexing_result):
    output = indexing_result.output
    assert "   Value: 1.0" in output
    assert "   Value: 7.0" in output
    assert "Values: [5.0, 6.0, 7.0, 8.0]" in output
    assert "Values: [3.0, 7.0, 11.0]" in output
    assert "Values: [[6.0, 7.0], [10.0, 11.0]]" in output
    assert "Values: [[1.0, 2.0, 3.0, 4.0], [9.0, 10.0, 11.0, 12.0]]" in output
    assert "Values: [[3.0, 4.0], [7.0, 8.0], [11.0, 12.0]]" in output


def test_indexing_scalar_summary(indexing_result):
    assert _tensor(indexing_result, "element_1_2").sample_values == "Tensor[7.0; f32]"


def test_indexing_metric(indexing_result):
    assert len(indexing_result.metrics) == 1
    metric = indexing_result.metrics[0]
    assert metric.operation == "tensor_indexing_exercise"
    assert metric.backend == "CPU"
    assert metric.additional_info == {
        "total_operations": "12",
        "tensor_dimensions": "2D and 3D",
    }


@pytest.mark.parametrize(
    "name, shape",
    [
        ("base_matrix_4x5", (4, 5)),
        ("every_other_row", (2, 5)),
        ("every_other_col", (4, 3)),
        ("top_left_block", (2, 2)),
        ("bottom_right_block", (2, 2)),
        ("large_value_rows", (2, 5)),
        ("slice_and_reshape", (6,)),
        ("final_selection", (2, 2)),
    ],
)
def test_slicing_tensor_shapes(slicing_result, name, shape):
    assert _tensor(slicing_result, name).shape == shape


def test_slicing_values(slicing_result):
    output = slicing_result.output
    assert "Diagonal elements: [1, 6, 11, 16]" in output
    assert "Values: [[1.0, 2.0], [5.0, 6.0]]" in output
    assert "Values: [[11.0, 12.0], [15.0, 16.0]]" in output
    assert "Values: [7.0, 8.0, 9.0, 12.0, 13.0, 14.0]" in output
    assert "Values: [[2.0, 4.0], [17.0, 19.0]]" in output
    assert (
        "Values: [[1.0, 3.0, 5.0], [6.0, 8.0, 10.0], "
        "[11.0, 13.0, 15.0], [16.0, 18.0, 20.0]]"
    ) in output


def test_slicing_metric(slicing_result):
    assert len(slicing_result.metrics) == 1
    metric = slicing_result.metrics[0]
    assert metric.operation == "tensor_slicing_patterns_exercise"
    assert metric.duration_ns == 0
    assert metric.additional_info["pattern_types"] == "strided, diagonal, block, conditional"