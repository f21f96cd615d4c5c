from configure import ARROW
from point import Point
from utils import pairs


def parse_points(text):
    # every line holds one segment, i.e. "0,9 -> 5,9". a token that does not
    # parse is dropped, which can shift the pairing of the following points
    points = []
    for line in text.splitlines():
        for token in line.split(ARROW):
            try:
                points.append(Point.from_string(token))
            except ValueError:
                continue
    return points


class Segments(object):
    # a flat list of points, where each two consecutive points are one line
    def __init__(self, points=None):
        if points is None:
            points = []
        self.points = list(points)

    @classmethod
    def from_string(cls, text):
        return cls(parse_points(text))

    @classmethod
    def from_file(cls, filename):
        with open(filename, "r") as input_file:
            return cls.from_string(input_file.read())

    def add_segment(self, p0, p1):
        self.points += [p0, p1]

    def max_dimensions(self):
        # the largest x and y of all points, (0, 0) when empty
        max_x = max([p.x for p in self.points] + [0])
        max_y = max([p.y for p in self.points] + [0])
        return max_x, max_y

    @property
    def num_segments(self):
        return len(self.points) // 2

    def __len__(self):
        return self.num_segments

    def __iter__(self):
        return pairs(self.points)

    def __str__(self):
        output = ""
        for p0, p1 in self:
            output += "{}{}{}\n".format(p0, ARROW, p1)
        return output

    def __repr__(self):
        return self.__str__()
