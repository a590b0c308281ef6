import random


def random_point_sets(seed, count=200, span=3):
    """Small integer grids, so duplicates and collinear runs show up often."""
    rng = random.Random(seed)
    for _ in range(count):
        n = rng.randint(0, 9)
        yield [(rng.randint(-span, span), rng.randint(-span, span)) for _ in range(n)]
