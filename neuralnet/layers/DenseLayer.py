import logging
import math
import numbers

import numpy as np

from .Layer import Layer
from ..activations import deserialize_activation, is_activation
from ..errors import DecodeError, PreconditionError
from ..helpers import codec
from ..helpers.kahan import KahanSummer

logger = logging.getLogger(__name__)

DENSE_LAYER_TYPE = "denselayer"


def _read_only(arr):
    if arr is None:
        return None
    view = arr.view()
    view.flags.writeable = False
    return view


def _as_vector(v, length):
    """Return v as a float64 vector of the given length, or None."""
    try:
        arr = np.asarray(v, dtype=np.float64)
    except (TypeError, ValueError):
        return None
    if arr.ndim != 1 or arr.shape[0] != length:
        return None
    return arr


class DenseParams:
    """Parameters for a dense, or "fully-connected", layer."""

    def __init__(self, activation, input_count, output_count):
        self.activation = activation
        self.input_count = input_count
        self.output_count = output_count

    def make(self):
        return DenseLayer(self.input_count, self.output_count, self.activation)


@codec.register_layer(DENSE_LAYER_TYPE)
class DenseLayer(Layer):
    def __init__(self, input_count, output_count, activation):
        for name, count in (("input_count", input_count), ("output_count", output_count)):
            if isinstance(count, bool) or not isinstance(count, numbers.Integral) or count <= 0:
                raise ValueError(f"{name} must be a positive integer, got {count!r}")
        if not is_activation(activation):
            raise ValueError(f"{activation!r} does not implement the activation interface")

        input_count = int(input_count)
        output_count = int(output_count)
        self._activation = activation

        # Row i holds the weights of neuron i (and thus of output i)
        # weights: (output_count, input_count)
        # biases: (output_count,)
        self._weights = np.zeros((output_count, input_count), dtype=np.float64)
        self._biases = np.zeros(output_count, dtype=np.float64)

        # forward caches
        self._output_sums = np.zeros(output_count, dtype=np.float64)
        self._output = np.zeros(output_count, dtype=np.float64)

        # backward caches
        self._weight_gradient = np.zeros_like(self._weights)
        self._bias_gradient = np.zeros_like(self._biases)
        self._upstream_gradient = np.zeros(input_count, dtype=np.float64)

        # caller-owned vectors, held by reference
        self._input = None
        self._downstream_gradient = None

        # output_sums match the current input and parameters
        self._forward_valid = False

    # ----- accessors -----
    @property
    def input_count(self):
        return self._weights.shape[1]

    @property
    def output_count(self):
        return self._weights.shape[0]

    @property
    def activation(self):
        return self._activation

    @property
    def weights(self):
        """Weight matrix, one row per output neuron. Read-only view."""
        return _read_only(self._weights)

    @property
    def biases(self):
        return _read_only(self._biases)

    @property
    def input(self):
        return _read_only(self._input)

    @property
    def output(self):
        return _read_only(self._output)

    @property
    def output_sums(self):
        return _read_only(self._output_sums)

    @property
    def downstream_gradient(self):
        return _read_only(self._downstream_gradient)

    @property
    def upstream_gradient(self):
        return _read_only(self._upstream_gradient)

    @property
    def weight_gradient(self):
        return _read_only(self._weight_gradient)

    @property
    def bias_gradient(self):
        return _read_only(self._bias_gradient)

    # ----- initialization -----
    def randomize(self, rng=None):
        """
        Draw biases uniformly with variance 1, and weights uniformly so that
        the weighted sum over all inputs of a neuron has variance 1 (assuming
        unit-variance inputs).

        rng is anything with numpy's uniform(low, high, size); defaults to the
        global numpy.random state.
        """
        if rng is None:
            rng = np.random
        sqrt3 = math.sqrt(3)
        self._biases[:] = rng.uniform(-sqrt3, sqrt3, size=self._biases.shape)
        weight_coeff = math.sqrt(3.0 / self.input_count)
        self._weights[:] = rng.uniform(-weight_coeff, weight_coeff, size=self._weights.shape)
        self._forward_valid = False
        logger.debug("Randomized %dx%d dense layer", self.output_count, self.input_count)

    # ----- forward -----
    def set_input(self, v):
        arr = _as_vector(v, self.input_count)
        if arr is None:
            return False
        self._input = arr
        self._forward_valid = False
        return True

    def propagate_forward(self):
        if self._input is None:
            raise PreconditionError("Must call set_input() before propagate_forward()")

        # One compensated sum per neuron, terms added in input order, bias last
        summer = KahanSummer(self.output_count)
        for j in range(self.input_count):
            summer.add(self._weights[:, j] * self._input[j])
        summer.add(self._biases)

        self._output_sums[:] = summer.total()
        self._output[:] = self._activation.evaluate(self._output_sums)
        self._forward_valid = True
        return self.output

    # ----- backward -----
    def set_downstream_gradient(self, v):
        arr = _as_vector(v, self.output_count)
        if arr is None:
            return False
        self._downstream_gradient = arr
        return True

    def propagate_backward(self, upstream):
        if self._input is None or not self._forward_valid:
            raise PreconditionError(
                "Must call propagate_forward() with the current input and "
                "parameters before propagate_backward()"
            )
        if self._downstream_gradient is None:
            raise PreconditionError(
                "Must call set_downstream_gradient() before propagate_backward()"
            )

        # delta_i = dL/d(output_sums[i]), chain rule through the activation
        deltas = self._downstream_gradient * self._activation.derivative(self._output_sums)
        self._bias_gradient[:] = deltas
        # weight_gradient[i][j] = input[j] * delta_i
        self._weight_gradient[:] = np.outer(deltas, self._input)

        if upstream:
            # upstream[j] = sum_i delta_i * weights[i][j], accumulated row by row
            self._upstream_gradient[:] = 0.0
            for i in range(self.output_count):
                self._upstream_gradient += deltas[i] * self._weights[i]

    # ----- update -----
    def gradient_magnitude_squared(self):
        """Squared L2 norm of the full gradient: biases first, then weights row-major."""
        summer = KahanSummer()
        for x in self._bias_gradient:
            summer.add(x * x)
        for grad in self._weight_gradient.ravel():
            summer.add(grad * grad)
        return summer.total()

    def step_gradient(self, factor):
        # factor is usually a negative learning rate
        self._biases += self._bias_gradient * factor
        self._weights += self._weight_gradient * factor
        self._forward_valid = False

    # ----- serialization -----
    def serializer_type(self):
        return DENSE_LAYER_TYPE

    def serialize(self):
        return codec.encode_record({
            "layer_type": DENSE_LAYER_TYPE,
            "activation_type": self._activation.serializer_type(),
            "activation_data": codec.encode_bytes(self._activation.serialize()),
            "weights": self._weights.tolist(),
            "biases": self._biases.tolist(),
            "input_size": self.input_count,
            "output_size": self.output_count,
        })

    @classmethod
    def deserialize(cls, data):
        record = codec.decode_record(data, DENSE_LAYER_TYPE)

        input_size = codec.record_int(record, "input_size")
        output_size = codec.record_int(record, "output_size")

        weights = record.get("weights")
        if not isinstance(weights, list) or len(weights) != output_size:
            raise DecodeError(
                f"weights: expected {output_size} rows, got "
                f"{len(weights) if isinstance(weights, list) else type(weights).__name__}"
            )
        weights = [
            codec.record_floats(row, input_size, f"weights row {i}")
            for i, row in enumerate(weights)
        ]
        biases = codec.record_floats(record.get("biases"), output_size, "biases")

        activation_type = record.get("activation_type")
        if not isinstance(activation_type, str):
            raise DecodeError(f"activation_type must be a string, got {activation_type!r}")
        activation = deserialize_activation(
            codec.decode_bytes(record.get("activation_data")), activation_type
        )

        layer = cls(input_size, output_size, activation)
        layer._weights[:] = np.array(weights, dtype=np.float64).reshape(output_size, input_size)
        layer._biases[:] = np.array(biases, dtype=np.float64)
        logger.debug(
            "Decoded %dx%d dense layer with %s activation",
            output_size, input_size, activation_type,
        )
        return layer
