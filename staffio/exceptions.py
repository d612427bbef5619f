class FieldRejected(ValueError):
    """
    Raised by field setters to refuse a value.

    The field descriptor catches it, keeps the value it currently holds and
    reports the rejection to the model, so it never reaches the code that made
    the assignment.
    """
