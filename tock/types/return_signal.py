from tock import LispValue


class ReturnSignal:
    """Marker produced by `(return x)`; unwrapped by the nearest function body
    or sequence and never visible to programs."""

    __slots__ = ("value",)

    def __init__(self, value: LispValue):
        self.value = value

    def __repr__(self):
        return f"ReturnSignal({self.value!r})"
