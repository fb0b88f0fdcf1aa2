"""Exercise on reshaping, squeezing, unsqueezing and broadcasting tensors."""

from __future__ import annotations

import numpy as np

from tensordrill.backend import Device
from tensordrill.exercise import Exercise, ExerciseResult, Metric, TensorInfo
from tensordrill.exercises.tensor_creation import _format_values, _shape, _tensor_repr


class TensorShapeExercise(Exercise):
    """Change tensor shapes without changing their data."""

    name = "Tensor Shape Manipulation"
    description = "Manipulate tensor shapes through reshaping, squeezing, and unsqueezing"

    def run(self, device: Device) -> ExerciseResult:
        result = ExerciseResult()

        result.add_educational_note(
            "Tensor shape manipulation is crucial for preparing data for various operations."
        )
        result.add_educational_note(
            "Common operations include reshape, squeeze (remove dimensions of size 1), "
            "and unsqueeze (add dimensions of size 1)."
        )

        base_data = np.array([1.0, 2.0, 3.0, 4.0, 5.0, 6.0], dtype=np.float32)
        base_tensor = base_data.reshape(2, 3)

        result.add_output("\nBase tensor for shape manipulations:")
        result.add_output(f"   Tensor: {_tensor_repr(base_tensor)}")
        result.add_output(f"   Shape: {_shape(base_tensor)}")
        result.add_output(f"   Values: {_format_values(base_tensor)}")

        result.add_output("\n1. Reshaping a tensor:")
        reshaped = base_tensor.reshape(3, 2)
        result.add_output(f"   Reshaped (3x2): {_tensor_repr(reshaped)}")
        result.add_output(f"   New shape: {_shape(reshaped)}")
        result.add_output(f"   Values: {_format_values(reshaped)}")
        result.add_tensor(TensorInfo.from_tensor("reshaped", reshaped))

        result.add_output("\n2. Flattening a tensor:")
        flattened = base_tensor.reshape(-1)
        result.add_output(f"   Flattened: {_tensor_repr(flattened)}")
        result.add_output(f"   New shape: {_shape(flattened)}")
        result.add_output(f"   Values: {_format_values(flattened)}")
        result.add_tensor(TensorInfo.from_tensor("flattened", flattened))

        result.add_output("\n3. Squeezing a tensor (removing dimensions of size 1):")
        tensor_with_ones = base_data.reshape(1, 2, 3)
        result.add_output(
            f"   Original: {_tensor_repr(tensor_with_ones)} "
            f"with shape {_shape(tensor_with_ones)}"
        )
        squeezed = np.squeeze(tensor_with_ones, axis=0)
        result.add_output(
            f"   After squeeze(0): {_tensor_repr(squeezed)} with shape {_shape(squeezed)}"
        )
        tensor_with_end_one = base_data.reshape(2, 3, 1)
        squeezed_end = np.squeeze(tensor_with_end_one, axis=2)
        result.add_output(
            f"   Tensor with shape (2,3,1) after squeeze(2): {_tensor_repr(squeezed_end)} "
            f"with shape {_shape(squeezed_end)}"
        )
        result.add_tensor(TensorInfo.from_tensor("squeezed", squeezed_end))

        result.add_output("\n4. Unsqueezing a tensor (adding dimensions of size 1):")
        unsqueezed_0 = np.expand_dims(base_tensor, 0)
        result.add_output(
            f"   After unsqueeze(0): {_tensor_repr(unsqueezed_0)} "
            f"with shape {_shape(unsqueezed_0)}"
        )
        unsqueezed_2 = np.expand_dims(base_tensor, 2)
        result.add_output(
            f"   After unsqueeze(2): {_tensor_repr(unsqueezed_2)} "
            f"with shape {_shape(unsqueezed_2)}"
        )
        result.add_tensor(TensorInfo.from_tensor("unsqueezed", unsqueezed_2))

        result.add_output("\n5. Broadcasting a tensor to a new shape:")
        vector = np.array([1.0, 2.0, 3.0], dtype=np.float32)
        result.add_output(
            f"   Original vector: {_tensor_repr(vector)} with shape {_shape(vector)}"
        )
        broadcasted = np.broadcast_to(vector, (2, 3))
        result.add_output(f"   Broadcasted to (2,3): {_tensor_repr(broadcasted)}")
        result.add_output(f"   Values: {_format_values(broadcasted)}")
        result.add_tensor(TensorInfo.from_tensor("broadcasted", broadcasted))

        result.add_output("\n6. Using view for efficient reshaping:")
        view_reshaped = base_tensor.reshape(6, 1)
        result.add_output(
            f"   View as (6,1): {_tensor_repr(view_reshaped)} "
            f"with shape {_shape(view_reshaped)}"
        )
        result.add_output(f"   Values: {_format_values(view_reshaped)}")
        result.add_tensor(TensorInfo.from_tensor("view_reshaped", view_reshaped))

        result.add_metric(
            Metric(
                operation="tensor_shape_exercise",
                duration_ns=0,
                backend=str(device.backend),
                additional_info={"total_operations": "6"},
            )
        )
        return result