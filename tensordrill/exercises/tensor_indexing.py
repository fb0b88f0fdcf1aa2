"""Exercises on indexing, slicing and selecting parts of tensors."""

from __future__ import annotations

import numpy as np

from tensordrill.backend import Device
from tensordrill.exercise import Exercise, ExerciseResult, Metric, TensorInfo
from tensordrill.exercises.tensor_creation import _format_values, _shape, _tensor_repr


def _narrow(array: np.ndarray, dim: int, start: int, length: int) -> np.ndarray:
    """Take `length` entries of `array` along `dim`, starting at `start`."""
    if not 0 <= dim < array.ndim:
        raise IndexError(f"dimension {dim} out of range for {array.ndim}-d tensor")
    size = array.shape[dim]
    if start < 0 or length < 0 or start + length > size:
        raise IndexError(
            f"narrow({dim}, {start}, {length}) out of range for dimension of size {size}"
        )
    index = [slice(None)] * array.ndim
    index[dim] = slice(start, start + length)
    return array[tuple(index)]


def _index_select(array: np.ndarray, indices: np.ndarray, dim: int) -> np.ndarray:
    """Gather the entries of `array` at `indices` along `dim`."""
    size = array.shape[dim]
    if any(int(i) >= size for i in indices):
        raise IndexError(f"index out of range for dimension {dim} of size {size}")
    return np.take(array, indices, axis=dim)


class TensorIndexingExercise(Exercise):
    """Access elements, rows, columns and sub-blocks of tensors."""

    name = "Tensor Indexing and Slicing"
    description = "Learn tensor indexing, slicing, and element access operations"

    def run(self, device: Device) -> ExerciseResult:
        result = ExerciseResult()

        result.add_educational_note(
            "Tensor indexing and slicing are fundamental operations for accessing "
            "and manipulating tensor data."
        )
        result.add_educational_note(
            "Tensors provide various methods for indexing including narrow, get, "
            "and slice operations."
        )

        def record(name: str, array: np.ndarray) -> None:
            result.add_tensor(TensorInfo.from_tensor(name, array))

        matrix_3x4 = np.arange(1, 13, dtype=np.float32).reshape(3, 4)

        result.add_output("\nBase tensor for indexing demonstrations:")
        result.add_output(f"   Matrix (3x4): {_tensor_repr(matrix_3x4)}")
        result.add_output(f"   Shape: {_shape(matrix_3x4)}")
        result.add_output(f"   Values: {_format_values(matrix_3x4)}")
        record("base_matrix", matrix_3x4)

        result.add_output("\n1. Getting single elements:")
        element_0_0 = matrix_3x4[0][0]
        result.add_output(f"   Element at [0,0]: {_tensor_repr(element_0_0)}")
        result.add_output(f"   Value: {_format_values(element_0_0)}")
        element_1_2 = matrix_3x4[1][2]
        result.add_output(f"   Element at [1,2]: {_tensor_repr(element_1_2)}")
        result.add_output(f"   Value: {_format_values(element_1_2)}")
        record("element_1_2", element_1_2)

        result.add_output("\n2. Getting rows and columns:")
        row_1 = matrix_3x4[1]
        result.add_output(f"   Row 1: {_tensor_repr(row_1)}")
        result.add_output(f"   Values: {_format_values(row_1)}")
        record("row_1", row_1)

        col_2 = matrix_3x4.T[2]
        result.add_output(f"   Column 2: {_tensor_repr(col_2)}")
        result.add_output(f"   Values: {_format_values(col_2)}")
        record("col_2", col_2)

        result.add_output("\n3. Narrow operations (slicing):")
        rows_slice = _narrow(matrix_3x4, 0, 1, 2)
        result.add_output(f"   Rows 1-2: {_tensor_repr(rows_slice)}")
        result.add_output(f"   Shape: {_shape(rows_slice)}")
        result.add_output(f"   Values: {_format_values(rows_slice)}")
        record("rows_slice", rows_slice)

        cols_slice = _narrow(matrix_3x4, 1, 1, 2)
        result.add_output(f"   Columns 1-2: {_tensor_repr(cols_slice)}")
        result.add_output(f"   Shape: {_shape(cols_slice)}")
        result.add_output(f"   Values: {_format_values(cols_slice)}")
        record("cols_slice", cols_slice)

        result.add_output("\n4. Combined slicing:")
        submatrix = _narrow(_narrow(matrix_3x4, 0, 1, 2), 1, 1, 2)
        result.add_output(f"   Submatrix [1:3, 1:3]: {_tensor_repr(submatrix)}")
        result.add_output(f"   Shape: {_shape(submatrix)}")
        result.add_output(f"   Values: {_format_values(submatrix)}")
        record("submatrix", submatrix)

        result.add_output("\n5. 3D tensor indexing:")
        tensor_3d = np.arange(1, 25, dtype=np.float32).reshape(2, 3, 4)
        result.add_output(f"   3D tensor (2x3x4): {_tensor_repr(tensor_3d)}")
        result.add_output(f"   Shape: {_shape(tensor_3d)}")

        slice_0 = tensor_3d[0]
        result.add_output(f"   First slice [0,:,:]: {_tensor_repr(slice_0)}")
        result.add_output(f"   Shape: {_shape(slice_0)}")
        result.add_output(f"   Values: {_format_values(slice_0)}")
        record("slice_0", slice_0)

        narrow_3d = _narrow(_narrow(_narrow(tensor_3d, 0, 0, 1), 1, 1, 2), 2, 1, 2)
        result.add_output(f"   Narrow 3D [0:1, 1:3, 1:3]: {_tensor_repr(narrow_3d)}")
        result.add_output(f"   Shape: {_shape(narrow_3d)}")
        record("narrow_3d", narrow_3d)

        result.add_output("\n6. Advanced indexing patterns:")
        indices = np.array([0, 2], dtype=np.uint32)
        selected_rows = _index_select(matrix_3x4, indices, 0)
        result.add_output(f"   Selected rows [0, 2]: {_tensor_repr(selected_rows)}")
        result.add_output(f"   Shape: {_shape(selected_rows)}")
        result.add_output(f"   Values: {_format_values(selected_rows)}")
        record("selected_rows", selected_rows)

        result.add_output("\n7. Boundary conditions:")
        result.add_output(f"   Original matrix shape: {_shape(matrix_3x4)}")
        result.add_output("   Valid narrow: narrow(0, 0, 3) - takes all rows")
        all_rows = _narrow(matrix_3x4, 0, 0, 3)
        result.add_output(f"   Result shape: {_shape(all_rows)}")

        result.add_output("   Valid narrow: narrow(1, 2, 2) - takes last 2 columns")
        last_cols = _narrow(matrix_3x4, 1, 2, 2)
        result.add_output(f"   Result shape: {_shape(last_cols)}")
        result.add_output(f"   Values: {_format_values(last_cols)}")
        record("last_cols", last_cols)

        result.add_metric(
            Metric(
                operation="tensor_indexing_exercise",
                duration_ns=0,
                backend=str(device.backend),
                additional_info={
                    "total_operations": "12",
                    "tensor_dimensions": "2D and 3D",
                },
            )
        )
        return result


class TensorSlicingPatternsExercise(Exercise):
    """Strided, diagonal, block and index-based selections."""

    name = "Advanced Tensor Slicing Patterns"
    description = "Explore advanced slicing patterns and tensor manipulation techniques"

    def run(self, device: Device) -> ExerciseResult:
        result = ExerciseResult()

        result.add_educational_note(
            "Advanced slicing patterns enable complex data manipulation and are "
            "essential for neural network operations."
        )
        result.add_educational_note(
            "Understanding strided access, masked indexing, and conditional selection "
            "is crucial for efficient tensor operations."
        )

        def record(name: str, array: np.ndarray) -> None:
            result.add_tensor(TensorInfo.from_tensor(name, array))

        def show_selection(label: str, name: str, array: np.ndarray) -> None:
            result.add_output(f"   {label}: {_tensor_repr(array)}")
            result.add_output(f"   Values: {_format_values(array)}")
            record(name, array)

        matrix_4x5 = np.arange(1, 21, dtype=np.float32).reshape(4, 5)

        result.add_output("\nBase tensor for advanced slicing:")
        result.add_output(f"   Matrix (4x5): {_tensor_repr(matrix_4x5)}")
        result.add_output(f"   Values: {_format_values(matrix_4x5)}")
        record("base_matrix_4x5", matrix_4x5)

        result.add_output("\n1. Strided access patterns:")
        every_other_row = _index_select(
            matrix_4x5, np.array([0, 2], dtype=np.uint32), 0
        )
        show_selection("Every other row [0, 2]", "every_other_row", every_other_row)
        every_other_col = _index_select(
            matrix_4x5, np.array([0, 2, 4], dtype=np.uint32), 1
        )
        show_selection("Every other column [0, 2, 4]", "every_other_col", every_other_col)

        result.add_output("\n2. Diagonal extraction:")
        square_matrix = np.arange(1, 17, dtype=np.float32).reshape(4, 4)
        result.add_output(f"   Square matrix (4x4): {_tensor_repr(square_matrix)}")
        result.add_output(f"   Values: {_format_values(square_matrix)}")
        diagonal = ", ".join(f"{float(square_matrix[i][i]):.0f}" for i in range(4))
        result.add_output(f"   Diagonal elements: [{diagonal}]")

        result.add_output("\n3. Block extraction:")
        top_left = _narrow(_narrow(square_matrix, 0, 0, 2), 1, 0, 2)
        show_selection("Top-left 2x2 block", "top_left_block", top_left)
        bottom_right = _narrow(_narrow(square_matrix, 0, 2, 2), 1, 2, 2)
        show_selection("Bottom-right 2x2 block", "bottom_right_block", bottom_right)

        result.add_output("\n4. Conditional selection patterns:")
        large_value_rows = _index_select(
            matrix_4x5, np.array([2, 3], dtype=np.uint32), 0
        )
        show_selection("Rows with larger values [2, 3]", "large_value_rows", large_value_rows)

        result.add_output("\n5. Reshaping after slicing:")
        slice_and_reshape = _narrow(_narrow(matrix_4x5, 0, 1, 2), 1, 1, 3).reshape(6)
        result.add_output(f"   Sliced and reshaped to 1D: {_tensor_repr(slice_and_reshape)}")
        result.add_output(f"   Shape: {_shape(slice_and_reshape)}")
        result.add_output(f"   Values: {_format_values(slice_and_reshape)}")
        record("slice_and_reshape", slice_and_reshape)

        result.add_output("\n6. Multiple index selections:")
        row_indices = np.array([0, 3], dtype=np.uint32)
        col_indices = np.array([1, 3], dtype=np.uint32)
        final_selection = _index_select(
            _index_select(matrix_4x5, row_indices, 0), col_indices, 1
        )
        result.add_output(
            f"   Selected [0,3] rows then [1,3] cols: {_tensor_repr(final_selection)}"
        )
        result.add_output(f"   Shape: {_shape(final_selection)}")
        result.add_output(f"   Values: {_format_values(final_selection)}")
        record("final_selection", final_selection)

        result.add_metric(
            Metric(
                operation="tensor_slicing_patterns_exercise",
                duration_ns=0,
                backend=str(device.backend),
                additional_info={
                    "total_operations": "10",
                    "pattern_types": "strided, diagonal, block, conditional",
                },
            )
        )
        return result