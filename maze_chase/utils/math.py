"""Scalar helpers used to expose interpolated motion to collaborators."""


def lerp(a: float, b: float, interpolation: float) -> float:
    """Linear interpolation between ``a`` and ``b``.

    ``interpolation`` is clamped: values at or above 1.0 return ``b`` and
    values at or below 0.0 return ``a``.
    """
    if interpolation >= 1.0:
        return b
    if interpolation <= 0.0:
        return a
    return a + (b - a) * interpolation
