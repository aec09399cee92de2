class StepFunction:
    """Transition object for `Unfold` that can carry fields of its own.

    Subclasses implement `step`; instances are passed to `Unfold` like any
    other callable.
    """

    def step(self, base):
        raise NotImplementedError()

    def __call__(self, base):
        return self.step(base)
