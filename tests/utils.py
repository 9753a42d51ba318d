from exactfrac import Fraction, MixedFraction


def assert_fields(value: Fraction | MixedFraction, *expected: int):
    """Compares the stored fields, which equality deliberately ignores."""
    assert tuple(value) == expected, f"{value!r} does not have fields {expected}"


def sample_fractions() -> list[Fraction]:
    return [Fraction(n, d) for n in range(-12, 13) for d in (-6, -4, -1, 1, 2, 3, 5, 8)]
