"""Exercises on element-wise matrix arithmetic and broadcasting."""

from __future__ import annotations

import numpy as np

from tensordrill.backend import Device
from tensordrill.exercise import Exercise, ExerciseResult, Metric, TensorInfo
from tensordrill.exercises.tensor_creation import _format_values, _shape, _tensor_repr


class MatrixArithmeticExercise(Exercise):
    """Addition, subtraction, element-wise functions, reductions and comparisons."""

    name = "Matrix Arithmetic Operations"
    description = (
        "Learn basic matrix arithmetic including addition, subtraction, "
        "and element-wise operations"
    )

    def run(self, device: Device) -> ExerciseResult:
        result = ExerciseResult()

        result.add_educational_note(
            "Matrix arithmetic operations are fundamental building blocks for neural "
            "networks and scientific computing."
        )
        result.add_educational_note(
            "Tensors support element-wise operations, broadcasting, and efficient GPU "
            "acceleration for matrix computations."
        )

        def show(label: str, name: str, array: np.ndarray, value_label: str = "Values") -> None:
            result.add_output(f"   {label}: {_tensor_repr(array)}")
            result.add_output(f"   {value_label}: {_format_values(array)}")
            result.add_tensor(TensorInfo.from_tensor(name, array))

        matrix_a = np.array([1.0, 2.0, 3.0, 4.0, 5.0, 6.0], dtype=np.float32).reshape(2, 3)
        matrix_b = np.array([2.0, 1.0, 4.0, 3.0, 6.0, 5.0], dtype=np.float32).reshape(2, 3)

        result.add_output("\nBase matrices for arithmetic operations:")
        result.add_output(f"   Matrix A (2x3): {_tensor_repr(matrix_a)}")
        result.add_output(f"   Values A: {_format_values(matrix_a)}")
        result.add_output(f"   Matrix B (2x3): {_tensor_repr(matrix_b)}")
        result.add_output(f"   Values B: {_format_values(matrix_b)}")
        result.add_tensor(TensorInfo.from_tensor("matrix_a", matrix_a))
        result.add_tensor(TensorInfo.from_tensor("matrix_b", matrix_b))

        result.add_output("\n1. Matrix Addition (A + B):")
        show("Result", "matrix_sum", matrix_a + matrix_b)

        result.add_output("\n2. Matrix Subtraction (A - B):")
        show("Result", "matrix_diff", matrix_a - matrix_b)

        result.add_output("\n3. Element-wise Multiplication (A ⊙ B):")
        show("Result", "elem_mul", matrix_a * matrix_b)

        result.add_output("\n4. Element-wise Division (A ⊘ B):")
        show("Result", "elem_div", matrix_a / matrix_b)

        result.add_output("\n5. Scalar Operations:")
        show("A + 10", "scalar_add", (matrix_a * np.float32(1.0) + np.float32(10.0)))
        show("A * 2", "scalar_mul", (matrix_a * np.float32(2.0) + np.float32(0.0)))

        result.add_output("\n6. Broadcasting Operations:")
        row_vector = np.array([1.0, 2.0, 3.0], dtype=np.float32).reshape(1, 3)
        result.add_output(f"   Row vector (1x3): {_tensor_repr(row_vector)}")
        result.add_output(f"   Values: {_format_values(row_vector)}")
        broadcast_add = matrix_a + np.broadcast_to(row_vector, (2, 3))
        show("A + row_vector (broadcasting)", "broadcast_add", broadcast_add)

        col_vector = np.array([10.0, 20.0], dtype=np.float32).reshape(2, 1)
        result.add_output(f"   Column vector (2x1): {_tensor_repr(col_vector)}")
        result.add_output(f"   Values: {_format_values(col_vector)}")
        broadcast_mul = matrix_a * np.broadcast_to(col_vector, (2, 3))
        show("A * col_vector (broadcasting)", "broadcast_mul", broadcast_mul)

        result.add_output("\n7. Mathematical Functions:")
        show("sqrt(A)", "sqrt_result", np.sqrt(matrix_a))
        show("exp(A)", "exp_result", np.exp(matrix_a))
        show("log(A)", "log_result", np.log(matrix_a))

        result.add_output("\n8. Aggregation Operations:")
        show("Sum of all elements", "sum_all", np.sum(matrix_a, dtype=np.float32), "Value")
        show(
            "Sum along dimension 0 (columns)",
            "sum_dim0",
            np.sum(matrix_a, axis=0, dtype=np.float32),
        )
        show(
            "Sum along dimension 1 (rows)",
            "sum_dim1",
            np.sum(matrix_a, axis=1, dtype=np.float32),
        )
        show("Mean of all elements", "mean_all", np.mean(matrix_a, dtype=np.float32), "Value")

        result.add_output("\n9. Comparison Operations:")
        show("A > B", "gt_result", (matrix_a > matrix_b).astype(np.uint8))
        show("A < B", "lt_result", (matrix_a < matrix_b).astype(np.uint8))
        show("A == B", "eq_result", (matrix_a == matrix_b).astype(np.uint8))

        result.add_metric(
            Metric(
                operation="matrix_arithmetic_exercise",
                duration_ns=0,
                backend=str(device.backend),
                additional_info={
                    "total_operations": "15",
                    "operation_types": (
                        "arithmetic, broadcasting, functions, aggregation, comparison"
                    ),
                },
            )
        )
        return result


class BroadcastingExercise(Exercise):
    """Scalar, vector and mixed-shape broadcasting."""

    name = "Broadcasting Demonstrations"
    description = "Explore broadcasting rules and patterns for efficient tensor operations"

    def run(self, device: Device) -> ExerciseResult:
        result = ExerciseResult()

        result.add_educational_note(
            "Broadcasting allows operations between tensors of different shapes by "
            "automatically expanding dimensions."
        )
        result.add_educational_note(
            "Understanding broadcasting rules is crucial for efficient neural network "
            "implementations and avoiding unnecessary memory allocations."
        )

        def show(label: str, array: np.ndarray) -> None:
            result.add_output(f"   {label}: {_tensor_repr(array)}")
            result.add_output(f"   Values: {_format_values(array)}")

        result.add_output("\n1. Scalar Broadcasting:")
        matrix = np.array([1.0, 2.0, 3.0, 4.0], dtype=np.float32).reshape(2, 2)
        show("Matrix (2x2)", matrix)
        scalar_broadcast = matrix * np.float32(1.0) + np.float32(5.0)
        show("Matrix + 5 (scalar broadcast)", scalar_broadcast)
        result.add_tensor(TensorInfo.from_tensor("scalar_broadcast", scalar_broadcast))

        result.add_output("\n2. Vector Broadcasting:")
        matrix_3x4 = np.arange(1, 13, dtype=np.float32).reshape(3, 4)
        show("Matrix (3x4)", matrix_3x4)

        row_vec = np.array([1.0, 2.0, 3.0, 4.0], dtype=np.float32).reshape(1, 4)
        show("Row vector (1x4)", row_vec)
        row_broadcast = matrix_3x4 * np.broadcast_to(row_vec, (3, 4))
        show("Matrix * row_vector", row_broadcast)
        result.add_tensor(TensorInfo.from_tensor("row_broadcast", row_broadcast))

        col_vec = np.array([10.0, 20.0, 30.0], dtype=np.float32).reshape(3, 1)
        show("Column vector (3x1)", col_vec)
        col_broadcast = matrix_3x4 + np.broadcast_to(col_vec, (3, 4))
        show("Matrix + col_vector", col_broadcast)
        result.add_tensor(TensorInfo.from_tensor("col_broadcast", col_broadcast))

        result.add_output("\n3. Complex Broadcasting Patterns:")
        tensor_2x1x3 = np.arange(1, 7, dtype=np.float32).reshape(2, 1, 3)
        tensor_1x4x1 = np.array([10.0, 20.0, 30.0, 40.0], dtype=np.float32).reshape(1, 4, 1)
        result.add_output(f"   Tensor A (2x1x3): {_tensor_repr(tensor_2x1x3)}")
        result.add_output(f"   Shape: {_shape(tensor_2x1x3)}")
        result.add_output(f"   Tensor B (1x4x1): {_tensor_repr(tensor_1x4x1)}")
        result.add_output(f"   Shape: {_shape(tensor_1x4x1)}")

        tensor_a_simple = np.array([1.0, 2.0, 3.0, 4.0], dtype=np.float32).reshape(2, 2)
        tensor_b_simple = np.array([10.0, 20.0], dtype=np.float32).reshape(2, 1)
        complex_broadcast = tensor_a_simple + np.broadcast_to(tensor_b_simple, (2, 2))
        result.add_output(f"   A + B (broadcast): {_tensor_repr(complex_broadcast)}")
        result.add_output(f"   Result shape: {_shape(complex_broadcast)}")
        result.add_output(f"   Values: {_format_values(complex_broadcast)}")
        result.add_tensor(TensorInfo.from_tensor("complex_broadcast", complex_broadcast))

        result.add_output("\n4. Broadcasting with Mathematical Functions:")
        base_matrix = np.arange(1, 7, dtype=np.float32).reshape(2, 3)
        power_vec = np.array([1.0, 2.0, 3.0], dtype=np.float32).reshape(1, 3)
        show("Base matrix (2x3)", base_matrix)
        show("Power vector (1x3)", power_vec)
        power_result = np.power(base_matrix, np.float32(2.0))
        show("base^2 (power function)", power_result)
        result.add_tensor(TensorInfo.from_tensor("power_result", power_result))

        result.add_output("\n5. Broadcasting Efficiency:")
        result.add_output("   Broadcasting avoids creating intermediate tensors:")
        result.add_output("   - Memory efficient: no temporary expanded tensors")
        result.add_output("   - Computationally efficient: operations applied directly")
        result.add_output("   - GPU friendly: vectorized operations across dimensions")

        large_matrix = np.zeros((100, 50), dtype=np.float32)
        bias_vector = np.ones((1, 50), dtype=np.float32)
        biased_matrix = large_matrix + np.broadcast_to(bias_vector, (100, 50))
        result.add_output(
            f"   Large matrix (100x50) + bias (1x50): {_shape(biased_matrix)}"
        )
        result.add_tensor(TensorInfo.from_tensor("biased_matrix", biased_matrix))

        result.add_metric(
            Metric(
                operation="broadcasting_exercise",
                duration_ns=0,
                backend=str(device.backend),
                additional_info={
                    "total_operations": "8",
                    "broadcast_patterns": "scalar, vector, complex, mathematical",
                },
            )
        )
        return result