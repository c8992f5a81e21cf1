from .Activation import (
    Activation,
    ACTIVATIONS,
    register_activation,
    deserialize_activation,
    is_activation,
)
from .Sigmoid import Sigmoid
from .Tanh import Tanh
from .ReLU import ReLU, LeakyReLU
from .Identity import Identity

__all__ = [
    "Activation",
    "ACTIVATIONS",
    "register_activation",
    "deserialize_activation",
    "is_activation",
    "Sigmoid",
    "Tanh",
    "ReLU",
    "LeakyReLU",
    "Identity",
]
