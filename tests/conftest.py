import pytest


class FixedRng:
    """Stand-in for numpy's Generator that always draws the same index."""

    def __init__(self, index: int = 0):
        self.index = index
        self.calls = []

    def integers(self, high):
        self.calls.append(high)
        return self.index


@pytest.fixture
def fixed_rng():
    return FixedRng()
