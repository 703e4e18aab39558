"""Right-angle test for triangles given by their side lengths."""


def is_rectangular(a: int, b: int, c: int) -> bool:
    """True if the sides satisfy Pythagoras in some order; all zero is not a triangle."""
    if a == 0 and b == 0 and c == 0:
        return False
    a2, b2, c2 = a * a, b * b, c * c
    return a2 + b2 == c2 or a2 + c2 == b2 or b2 + c2 == a2