"""
A two dimensional grid stored in a single flat numpy array.

The grid is row major: consecutive x values are next to each other in the
array, rows are strided by len_x. Cell (x, y) lives at index y*len_x + x.
"""
from numpy import array, array_equal, count_nonzero, full

from configure import OVERLAP_THRESHOLD


class GridIndexError(IndexError):
    pass


class Grid(object):
    def __init__(self, len_x, len_y, init=0, dtype=None):
        if len_x < 0 or len_y < 0:
            raise ValueError("grid dimensions must not be negative: %s x %s" % (len_x, len_y))
        self.len_x = int(len_x)
        self.len_y = int(len_y)
        self.flat = full(self.len_x * self.len_y, init, dtype=dtype)

    @classmethod
    def from_list(cls, len_x, len_y, values, dtype=None):
        # extra values are discarded
        values = list(values)
        if len(values) < len_x * len_y:
            raise ValueError("need %s values to fill a %s x %s grid, got %s" %
                             (len_x * len_y, len_x, len_y, len(values)))
        grid = cls(len_x, len_y, dtype=dtype)
        grid.flat = array(values[:len_x * len_y], dtype=dtype)
        return grid

    @classmethod
    def bordered_with_x(cls, len_x, border, values, dtype=None):
        # lay the values out in rows of len_x and put a one cell border around
        # them. a short last row is completed with the border value
        values = list(values)
        width = len_x + 2
        flat = [border] * width
        for start in range(0, len(values), len_x):
            row = values[start:start + len_x]
            flat += [border] + row + [border] * (len_x - len(row) + 1)
        flat += [border] * width
        return cls.from_list(width, len(flat) // width, flat, dtype=dtype)

    @property
    def size(self):
        return self.len_x * self.len_y

    def __len__(self):
        return self.size

    def index(self, x, y):
        if not (0 <= x < self.len_x and 0 <= y < self.len_y):
            raise GridIndexError("(%s, %s) is outside of the %s x %s grid" %
                                 (x, y, self.len_x, self.len_y))
        return y * self.len_x + x

    def get(self, x, y):
        return self.flat[self.index(x, y)]

    def set(self, x, y, value):
        self.flat[self.index(x, y)] = value

    def increment_by(self, x, y, delta):
        self.flat[self.index(x, y)] += delta

    def __getitem__(self, position):
        return self.get(*position)

    def __setitem__(self, position, value):
        self.set(position[0], position[1], value)

    # wrapping getters: an index past the end of the axis comes back around
    def wrap(self, x, y):
        return self.get(x % self.len_x, y % self.len_y)

    def wrap_x(self, x, y):
        return self.get(x % self.len_x, y)

    def wrap_y(self, x, y):
        return self.get(x, y % self.len_y)

    def line(self, y):
        # a view on the row, not a copy
        start = self.index(0, y)
        return self.flat[start:start + self.len_x]

    def line_no_border(self, y, border_size=1):
        start = self.index(0, y)
        return self.flat[start + border_size:start + self.len_x - border_size]

    def rows(self):
        return self.flat.reshape((self.len_y, self.len_x))

    def iter(self):
        return iter(self.flat)

    def __iter__(self):
        return self.iter()

    def inner_iter(self):
        for y in range(1, self.len_y - 1):
            for value in self.line_no_border(y):
                yield value

    def count_over(self, threshold=OVERLAP_THRESHOLD):
        return int(count_nonzero(self.flat > threshold))

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return self.len_x == other.len_x and self.len_y == other.len_y and \
            array_equal(self.flat, other.flat)

    def __str__(self):
        output = ""
        for y in range(self.len_y):
            output += " ".join(str(value) for value in self.line(y)) + "\n"
        return output

    def __repr__(self):
        return "Grid(%s, %s)" % (self.len_x, self.len_y)
