class GridCapacityError(ValueError):
    """The bounded grid cannot hold the requested number of distinct locations."""

    def __init__(self, requested: int, capacity: int, detail: str = ""):
        self.requested, self.capacity = requested, capacity
        msg = f"cannot place {requested} facilities in a grid of {capacity} cells"
        super().__init__(f"{msg}: {detail}" if detail else msg)


class InputFormatError(ValueError):
    """Console input is not an `x,y` integer pair."""
