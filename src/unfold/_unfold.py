class Unfold:
    """Lazy sequence built by repeatedly applying `transition` to `base`.

    `transition(base)` returns either ``None``, which ends the sequence, or a
    pair ``(next_base, item)``: `base` is replaced by `next_base` and `item`
    is produced.

    No exhausted flag is kept. Every call after the end of the sequence calls
    `transition` again on the unchanged base, so a deterministic transition
    keeps the sequence exhausted.
    """

    def __init__(self, base, transition):
        assert callable(transition), 'transition: Must be callable'

        self._base = base
        self._transition = transition

    @property
    def base(self):
        return self._base

    @property
    def transition(self):
        return self._transition

    def __iter__(self):
        return self

    def __next__(self):
        result = self._transition(self._base)
        if result is None:
            raise StopIteration()
        else:
            base, item = result
            self._base = base
            return item

    def __repr__(self):
        return '{}(base={!r}, transition={!r})'.format(type(self).__name__, self._base, self._transition)


def unfold(base, transition):
    return Unfold(base, transition)
