from collections import namedtuple


class Point(namedtuple("Point", ["x", "y"])):
    # a lattice point. both coordinates are non-negative integers
    __slots__ = ()

    @classmethod
    def from_string(cls, text):
        # text needs to have two values separated by a comma, i.e. "15,21"
        values = text.strip().split(",")
        if len(values) < 2:
            raise ValueError("could not find two coordinates in %r" % text)
        x, y = int(values[0]), int(values[1])
        if x < 0 or y < 0:
            raise ValueError("coordinates must not be negative: %r" % text)
        return cls(x, y)

    def is_same_column(self, other):
        return self.x == other.x

    def is_same_row(self, other):
        return self.y == other.y

    def tuple(self):
        return self.x, self.y

    def __add__(self, other):
        return Point(self.x + other.x, self.y + other.y)

    def __str__(self):
        return "{},{}".format(self.x, self.y)
