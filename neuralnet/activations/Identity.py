import numpy as np

from .Activation import Activation, register_activation


@register_activation("identity")
class Identity(Activation):
    """f(x) = x. Turns a dense layer into a plain affine map."""

    def evaluate(self, x):
        return x

    def derivative(self, x):
        return np.ones_like(x, dtype=np.float64)
