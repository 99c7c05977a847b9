"""Number rendering shared by the text reports."""


def format_number(value):
    """Render a number with at most six significant digits, trailing zeros dropped.

    Integers are shown in full; floats use the general format, so ``100.0``
    becomes ``"100"`` and ``1234567.0`` becomes ``"1.23457e+06"``.
    """
    if isinstance(value, bool):
        raise TypeError("format_number expects a number, not a bool")
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return "%g" % value
    raise TypeError(f"format_number expects a number, got {type(value).__name__}")