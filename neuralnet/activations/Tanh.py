import numpy as np

from .Activation import Activation, register_activation


@register_activation("tanh")
class Tanh(Activation):
    def evaluate(self, x):
        return np.tanh(x)

    def derivative(self, x):
        return 1 - np.tanh(x) ** 2
