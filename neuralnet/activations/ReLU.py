import json

import numpy as np

from .Activation import Activation, register_activation
from ..errors import DecodeError


@register_activation("relu")
class ReLU(Activation):
    def evaluate(self, x):
        return np.maximum(0.0, x)

    def derivative(self, x):
        # slope 0 at x == 0
        return (np.asarray(x) > 0).astype(np.float64)


@register_activation("leakyrelu")
class LeakyReLU(Activation):
    """ReLU with slope `leak` for negative inputs. The slope is persisted."""

    def __init__(self, leak=0.01):
        self.leak = float(leak)

    def evaluate(self, x):
        return np.where(np.asarray(x) > 0, x, self.leak * np.asarray(x))

    def derivative(self, x):
        return np.where(np.asarray(x) > 0, 1.0, self.leak)

    def serialize(self) -> bytes:
        return json.dumps({"leak": self.leak}).encode("utf-8")

    @classmethod
    def deserialize(cls, data: bytes):
        try:
            payload = json.loads(data.decode("utf-8"))
            leak = payload["leak"]
        except (UnicodeDecodeError, ValueError, KeyError, TypeError, RecursionError) as e:
            raise DecodeError(f"Malformed LeakyReLU payload: {e}") from e
        if isinstance(leak, bool) or not isinstance(leak, (int, float)):
            raise DecodeError(f"LeakyReLU leak must be a number, got {leak!r}")
        try:
            return cls(leak)
        except OverflowError as e:
            raise DecodeError("LeakyReLU leak out of float range") from e
