import logging

from ..errors import DecodeError

logger = logging.getLogger(__name__)

# type tag -> class providing deserialize(data)
ACTIVATIONS = {}


class Activation:
    """
    Element-wise activation function used by a layer.

    Subclasses implement evaluate/derivative on scalars or numpy arrays and
    must keep derivative(x) the true derivative of evaluate at x: layers chain
    the two without checking. serialize() returns an opaque payload that the
    class's deserialize() accepts back, and serializer_type() names the tag the
    class was registered under.
    """

    # set by register_activation
    type_tag = None

    def evaluate(self, x):
        raise NotImplementedError

    def derivative(self, x):
        raise NotImplementedError

    def serialize(self) -> bytes:
        # Parameter-free activations have nothing to persist
        return b""

    def serializer_type(self) -> str:
        return self.type_tag

    @classmethod
    def deserialize(cls, data: bytes):
        if data:
            raise DecodeError(
                f"{cls.__name__} takes no parameters, got {len(data)} payload bytes"
            )
        return cls()

    def __eq__(self, other):
        return (
            type(self) is type(other)
            and self.serialize() == other.serialize()
        )

    def __hash__(self):
        return hash((type(self), self.serialize()))


def register_activation(tag):
    """Class decorator adding an Activation subclass to the tag registry."""
    def wrap(cls):
        previous = ACTIVATIONS.get(tag)
        # a reloaded module re-registers the same class under a new identity
        if previous is not None and (
            (previous.__module__, previous.__qualname__) != (cls.__module__, cls.__qualname__)
        ):
            raise ValueError(f"Activation type {tag!r} is already registered")
        cls.type_tag = tag
        ACTIVATIONS[tag] = cls
        logger.debug("Registered activation %s as %r", cls.__name__, tag)
        return cls
    return wrap


def deserialize_activation(data, tag):
    if tag not in ACTIVATIONS:
        raise DecodeError(
            f"Unknown activation type: {tag!r}. Available: {sorted(ACTIVATIONS)}"
        )
    return ACTIVATIONS[tag].deserialize(data)


def is_activation(obj):
    # an Activation class has the methods too, but unbound
    if isinstance(obj, type):
        return False
    return all(
        callable(getattr(obj, name, None))
        for name in ("evaluate", "derivative", "serialize", "serializer_type")
    )
