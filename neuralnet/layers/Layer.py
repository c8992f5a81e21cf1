class Layer:
    """
    Protocol shared by every layer kind.

    A network drives each layer through the same cycle: set_input,
    propagate_forward, read output; set_downstream_gradient,
    propagate_backward, read upstream_gradient; step_gradient. Subclasses
    override all of it.
    """

    def set_input(self, v):
        # Returns False (and changes nothing) if v has the wrong shape
        raise NotImplementedError

    def propagate_forward(self):
        raise NotImplementedError

    def set_downstream_gradient(self, v):
        raise NotImplementedError

    def propagate_backward(self, upstream):
        # upstream=False skips the gradient w.r.t. the input (first layer)
        raise NotImplementedError

    def gradient_magnitude_squared(self):
        raise NotImplementedError

    def step_gradient(self, factor):
        raise NotImplementedError

    def randomize(self, rng=None):
        raise NotImplementedError

    def serialize(self):
        raise NotImplementedError

    def serializer_type(self):
        raise NotImplementedError
