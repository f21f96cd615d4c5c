def step(old, new, magnitude=1):
    # the signed amount to add to a coordinate to move it from old towards new.
    # old == new gives a subtracting step, so only use it on an axis that moves
    # (or with a magnitude of 0)
    if new > old:
        return magnitude
    return -magnitude


def min_max(a, b):
    return min(a, b), max(a, b)


def pairs(sequence):
    # non-overlapping (even, odd) pairs. an unpaired last element is dropped
    items = list(sequence)
    for i in range(0, len(items) - 1, 2):
        yield items[i], items[i + 1]
