from __future__ import annotations


class CompositeIdError(Exception):
    pass


class InvalidLayout(CompositeIdError, ValueError):
    """
    the field vector (or the layout itself) does not match the declared bit widths.
    """


class FieldOverflow(CompositeIdError, ValueError):
    def __init__(self, index: int, value: int, bits: int) -> None:
        self.index = index
        self.value = value
        self.bits = bits
        super().__init__(
            f"field #{index} = {value} does not fit in {bits} bits (range 0..{(1 << bits) - 1})"
        )


class NegativeDuration(CompositeIdError, ValueError):
    def __init__(self, start: object, end: object) -> None:
        self.start = start
        self.end = end
        super().__init__(f"departure precedes benchmark start: {start} / {end}")
