def natural_compare(a, b):
    """
    Three-way comparison using the values' own ordering.
    Returns -1, 0 or 1 like a compareTo().
    """
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


class ComparisonCounter():
    """
    Wraps a three-way comparison function and counts how often it is called.

    The caller owns the counter and hands it to a TapeSorter, so counts
    never leak between measurements:

        counter = ComparisonCounter()
        TapeSorter(compare=counter).sort(tape)
        counter.comparisons
    """

    def __init__(self, compare=natural_compare):
        self.compare = compare
        self.comparisons = 0

    def __call__(self, a, b):
        self.comparisons += 1
        return self.compare(a, b)

    def reset(self):
        self.comparisons = 0
