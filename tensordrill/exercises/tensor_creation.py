"""Exercises on creating tensors from scalars, sequences and factory functions."""

from __future__ import annotations

import numpy as np

from tensordrill.backend import Device
from tensordrill.exercise import Exercise, ExerciseResult, Metric, TensorInfo

_DTYPE_DEBUG = {
    np.dtype(np.bool_): "U8",
    np.dtype(np.uint8): "U8",
    np.dtype(np.uint32): "U32",
    np.dtype(np.int64): "I64",
    np.dtype(np.float16): "F16",
    np.dtype(np.float32): "F32",
    np.dtype(np.float64): "F64",
}


def _format_scalar(value: np.ndarray) -> str:
    item = value[()]
    kind = value.dtype.kind
    if kind == "b":
        return str(int(item))
    if kind in "iu":
        return str(int(item))
    text = str(item)
    if text == "nan":
        return "NaN"
    return text.replace("e+", "e")


def _format_values(array) -> str:
    """Render array values as nested bracketed lists."""
    array = np.asarray(array)
    if array.ndim == 0:
        return _format_scalar(array)
    return "[" + ", ".join(_format_values(item) for item in array) + "]"


def _tensor_repr(array) -> str:
    """Short summary of a tensor: its dimensions and dtype."""
    return TensorInfo.from_tensor("", array).sample_values


def _shape(array) -> str:
    return str(list(np.asarray(array).shape))


def _dtype_debug(array) -> str:
    dtype = np.asarray(array).dtype
    try:
        return _DTYPE_DEBUG[dtype]
    except KeyError:
        raise TypeError(f"unsupported tensor dtype: {dtype}") from None


def _exercise_metric(operation: str, device: Device, **info: str) -> Metric:
    return Metric(
        operation=operation,
        duration_ns=0,
        backend=str(device.backend),
        additional_info=dict(info),
    )


class TensorCreationExercise(Exercise):
    """Create tensors of several dtypes and shapes."""

    name = "Tensor Creation"
    description = "Create tensors with different data types and shapes"

    def run(self, device: Device) -> ExerciseResult:
        result = ExerciseResult()
        rng = np.random.default_rng()

        result.add_educational_note(
            "Tensors are the fundamental data structure, similar to arrays or "
            "matrices but with n-dimensions."
        )
        result.add_educational_note(
            "Tensors support various data types: f32, f64, u8, u32, i64, etc."
        )

        def record(name: str, array: np.ndarray) -> None:
            result.add_tensor(TensorInfo.from_tensor(name, array))

        result.add_output("\n1. Creating a tensor from a scalar:")
        scalar_tensor = np.array(42.0, dtype=np.float32)
        result.add_output(f"   Scalar tensor: {_tensor_repr(scalar_tensor)}")
        record("scalar_tensor", scalar_tensor)

        result.add_output("\n2. Creating a tensor from a 1D vector:")
        vec_tensor = np.array([1.0, 2.0, 3.0, 4.0, 5.0], dtype=np.float32)
        result.add_output(f"   Vector tensor: {_tensor_repr(vec_tensor)}")
        result.add_output(f"   Shape: {_shape(vec_tensor)}")
        record("vec_tensor", vec_tensor)

        result.add_output("\n3. Creating a tensor from a 2D array:")
        matrix_tensor = np.array([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]], dtype=np.float32)
        result.add_output(f"   Matrix tensor: {_tensor_repr(matrix_tensor)}")
        result.add_output(f"   Shape: {_shape(matrix_tensor)}")
        record("matrix_tensor", matrix_tensor)

        result.add_output("\n4. Creating a tensor with explicit shape:")
        shaped_tensor = np.array(
            [1.0, 2.0, 3.0, 4.0, 5.0, 6.0], dtype=np.float32
        ).reshape(2, 3)
        result.add_output(f"   Shaped tensor (2x3): {_tensor_repr(shaped_tensor)}")
        result.add_output(f"   As 2D vector: {_format_values(shaped_tensor)}")
        record("shaped_tensor", shaped_tensor)

        result.add_output("\n5. Creating tensors with different data types:")
        typed = [
            ("f32", np.array([1.0, 2.0, 3.0], dtype=np.float32)),
            ("f64", np.array([1.0, 2.0, 3.0], dtype=np.float64)),
            ("i64", np.array([1, 2, 3], dtype=np.int64)),
            ("u32", np.array([1, 2, 3], dtype=np.uint32)),
        ]
        for label, array in typed:
            result.add_output(f"   {label} tensor: {_tensor_repr(array)}")
            result.add_output(f"   dtype: {_dtype_debug(array)}")
            record(f"{label}_tensor", array)

        result.add_output("\n6. Special tensor creation methods:")
        special = [
            ("Zeros (2x3)", "zeros", np.zeros((2, 3), dtype=np.float32)),
            ("Ones (2x2)", "ones", np.ones((2, 2), dtype=np.float32)),
            (
                "Random uniform (2x3)",
                "rand_uniform",
                rng.random((2, 3), dtype=np.float32),
            ),
            (
                "Random normal (2x3)",
                "rand_normal",
                rng.standard_normal((2, 3), dtype=np.float32),
            ),
        ]
        for label, name, array in special:
            result.add_output(f"   {label}: {_tensor_repr(array)}")
            result.add_output(f"   Values: {_format_values(array)}")
            record(name, array)

        result.add_output("\n7. Creating tensors with arange:")
        arange = np.arange(0.0, 10.0, dtype=np.float32)
        result.add_output(f"   Arange [0, 10): {_tensor_repr(arange)}")
        result.add_output(f"   Values: {_format_values(arange)}")
        record("arange", arange)

        result.add_output("\n8. Creating an identity matrix:")
        eye = np.eye(3, dtype=np.float32)
        result.add_output(f"   Identity (3x3): {_tensor_repr(eye)}")
        result.add_output(f"   Values: {_format_values(eye)}")
        record("eye", eye)

        result.add_metric(
            _exercise_metric("tensor_creation_exercise", device, total_tensors="15")
        )
        return result


class TensorFromDataExercise(Exercise):
    """Create tensors from lists, sequences and explicit shapes."""

    name = "Tensor From Data Sources"
    description = "Create tensors from different data sources like lists, arrays, and files"

    def run(self, device: Device) -> ExerciseResult:
        result = ExerciseResult()

        result.add_educational_note(
            "Tensors can be created from various data sources including Python "
            "lists, arrays, and even files."
        )
        result.add_educational_note(
            "When creating tensors, you need to specify the shape and ensure the "
            "data size matches."
        )

        result.add_output("\n1. Creating a tensor from a list with explicit shape:")
        tensor = np.array([1.0, 2.0, 3.0, 4.0, 5.0, 6.0], dtype=np.float32).reshape(2, 3)
        result.add_output(f"   Tensor: {_tensor_repr(tensor)}")
        result.add_output(f"   Shape: {_shape(tensor)}")
        result.add_output(f"   Values: {_format_values(tensor)}")
        result.add_tensor(TensorInfo.from_tensor("vec_tensor", tensor))

        result.add_output("\n2. Creating a tensor from slice with explicit shape:")
        data = (1.0, 2.0, 3.0, 4.0)
        tensor = np.array(data, dtype=np.float32).reshape(2, 2)
        result.add_output(f"   Tensor: {_tensor_repr(tensor)}")
        result.add_output(f"   Values: {_format_values(tensor)}")
        result.add_tensor(TensorInfo.from_tensor("slice_tensor", tensor))

        result.add_output("\n3. Creating a tensor from nested lists:")
        nested = [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]
        tensor = np.array(nested, dtype=np.float32)
        result.add_output(f"   Tensor: {_tensor_repr(tensor)}")
        result.add_output(f"   Values: {_format_values(tensor)}")
        result.add_tensor(TensorInfo.from_tensor("nested_vec_tensor", tensor))

        result.add_output("\n4. Creating a tensor from iterator:")
        tensor = np.fromiter((float(x) for x in range(6)), dtype=np.float32).reshape(2, 3)
        result.add_output(f"   Tensor: {_tensor_repr(tensor)}")
        result.add_output(f"   Values: {_format_values(tensor)}")
        result.add_tensor(TensorInfo.from_tensor("iter_tensor", tensor))

        result.add_output("\n5. Creating a tensor with a specific shape:")
        zeros = np.zeros((2, 3, 4), dtype=np.float32)
        result.add_output(f"   Tensor shape: {_shape(zeros)}")
        result.add_output(f"   Dimensions: {zeros.ndim}")
        result.add_output(f"   Total elements: {zeros.size}")
        result.add_tensor(TensorInfo.from_tensor("shaped_zeros", zeros))

        result.add_output("\n6. Creating tensors for broadcasting:")
        row_vector = np.array([1.0, 2.0, 3.0], dtype=np.float32).reshape(1, 3)
        col_vector = np.array([1.0, 2.0], dtype=np.float32).reshape(2, 1)
        for label, array in (("Row vector", row_vector), ("Column vector", col_vector)):
            result.add_output(f"   {label}: {_tensor_repr(array)}")
            result.add_output(f"   {label} shape: {_shape(array)}")
            result.add_output(f"   {label} values: {_format_values(array)}")
        result.add_tensor(TensorInfo.from_tensor("row_vector", row_vector))
        result.add_tensor(TensorInfo.from_tensor("col_vector", col_vector))

        result.add_metric(
            _exercise_metric("tensor_from_data_exercise", device, total_tensors="7")
        )
        return result