from .Layer import Layer
from .DenseLayer import DenseLayer, DenseParams, DENSE_LAYER_TYPE

__all__ = [
    "Layer",
    "DenseLayer",
    "DenseParams",
    "DENSE_LAYER_TYPE",
]
