"""Contains exceptions raised by the rule induction functions."""


class ShapeMismatchError(ValueError):
    """Raised when attribute values and classes do not describe the same rows."""

    def __init__(self, rows_count: int, classes_count: int, what: str = "attributes"):
        self.rows_count: int = rows_count
        self.classes_count: int = classes_count
        super().__init__(
            f"Number of rows in {what} ({rows_count}) does not match "
            f"the number of classes ({classes_count})"
        )
