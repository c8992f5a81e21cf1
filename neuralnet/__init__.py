"""
neuralnet
~~~~~~~~~

Dense ("fully-connected") layer with hand-derived forward and backward
passes, compensated summation, pluggable activations and a versioned JSON
record format for persisting trained layers.
"""

from .errors import DecodeError, PreconditionError
from .helpers.kahan import KahanSummer, kahan_sum
from .helpers.logger import configure_logging
from .helpers.codec import deserialize_layer, save_layer, load_layer
from .activations import (
    Activation,
    register_activation,
    deserialize_activation,
    Sigmoid,
    Tanh,
    ReLU,
    LeakyReLU,
    Identity,
)
from .layers import Layer, DenseLayer, DenseParams

__version__ = "0.1.0"

__all__ = [
    "DecodeError",
    "PreconditionError",
    "KahanSummer",
    "kahan_sum",
    "configure_logging",
    "deserialize_layer",
    "save_layer",
    "load_layer",
    "Activation",
    "register_activation",
    "deserialize_activation",
    "Sigmoid",
    "Tanh",
    "ReLU",
    "LeakyReLU",
    "Identity",
    "Layer",
    "DenseLayer",
    "DenseParams",
]
