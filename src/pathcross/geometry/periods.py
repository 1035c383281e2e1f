from datetime import datetime

def periods_overlap(first_start: datetime, second_end: datetime, first_end: datetime, second_start: datetime) -> bool:
    """
    Closed-interval overlap test between [first_start, first_end] and [second_start, second_end].
    The argument order matches how the intersection matcher passes segment times.
    """
    return first_start <= second_end and first_end >= second_start
