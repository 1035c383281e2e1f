import math

def truncate(value: float, decimals: int = 4) -> float:
    """
    Cuts value to the given number of decimals, towards zero (no rounding).
    truncate(1.23459) == 1.2345
    Values that truncate to zero lose their sign, truncate(-0.00001) == 0.0.
    """
    factor = 10 ** decimals
    return math.trunc(factor * value) / factor
