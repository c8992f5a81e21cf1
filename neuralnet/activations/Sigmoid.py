import numpy as np

from .Activation import Activation, register_activation


@register_activation("sigmoid")
class Sigmoid(Activation):
    def evaluate(self, x):
        # 1 / (1 + e^-x) written through tanh so large |x| never overflows exp
        return 0.5 * (1.0 + np.tanh(0.5 * x))

    def derivative(self, x):
        sig = self.evaluate(x)
        return sig * (1 - sig)
