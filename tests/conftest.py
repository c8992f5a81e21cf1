"""
conftest.py
~~~~~~~~~~~

Shared fixtures for the dense layer tests.
"""

import numpy as np
import pytest

from neuralnet.activations import Identity
from neuralnet.helpers import codec
from neuralnet.layers import DenseLayer


def build_layer(weights, biases, activation):
    """Create a DenseLayer holding the given parameters (via a layer record)."""
    weights = np.asarray(weights, dtype=np.float64)
    record = codec.encode_record({
        "layer_type": "denselayer",
        "activation_type": activation.serializer_type(),
        "activation_data": codec.encode_bytes(activation.serialize()),
        "weights": weights.tolist(),
        "biases": list(map(float, biases)),
        "input_size": weights.shape[1],
        "output_size": weights.shape[0],
    })
    return DenseLayer.deserialize(record)


@pytest.fixture
def scenario_layer():
    """2 inputs -> 1 output, identity activation, weights [[1, -1]], bias [0.5]."""
    return build_layer([[1.0, -1.0]], [0.5], Identity())


@pytest.fixture
def rng():
    return np.random.default_rng(1234)
