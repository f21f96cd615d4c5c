from point import Point
from utils import min_max, pairs, step


class LinePattern(object):
    ALL = "all"
    DIAGONAL = "diagonal"  # 45 degree lines
    HORIZONTAL = "horizontal"  # same row
    STRAIGHT = "straight"  # horizontal or vertical
    VERTICAL = "vertical"  # same column


def classify(p0, p1):
    # a degenerate segment (p0 == p1) counts as vertical
    if p0.is_same_column(p1):
        return LinePattern.VERTICAL
    if p0.is_same_row(p1):
        return LinePattern.HORIZONTAL
    return LinePattern.DIAGONAL


def matches(pattern, p0, p1):
    line_type = classify(p0, p1)
    if pattern == LinePattern.ALL:
        return True
    if pattern == LinePattern.STRAIGHT:
        return line_type != LinePattern.DIAGONAL
    return line_type == pattern


def is_supported(p0, p1):
    # only straight lines and diagonals at exactly 45 degrees can be drawn
    return p0.is_same_column(p1) or p0.is_same_row(p1) or \
        abs(p1.x - p0.x) == abs(p1.y - p0.y)


def line_points(p0, p1):
    # walk from p0 to p1, both included. the fixed axis of a straight line gets
    # a step of 0. the walk only stops on p1 itself, so p0 and p1 must be on a
    # supported line
    dx = step(p0.x, p1.x, 0 if p0.is_same_column(p1) else 1)
    dy = step(p0.y, p1.y, 0 if p0.is_same_row(p1) else 1)
    x, y = p0.tuple()
    yield Point(x, y)
    while (x, y) != p1.tuple():
        x += dx
        y += dy
        yield Point(x, y)


def fill_column(grid, p0, p1):
    # the column comes from p0 alone
    x = p0.x
    y0, y1 = min_max(p0.y, p1.y)
    for y in range(y0, y1 + 1):
        grid.increment_by(x, y, 1)


def fill_row(grid, p0, p1):
    y = p0.y
    x0, x1 = min_max(p0.x, p1.x)
    for x in range(x0, x1 + 1):
        grid.increment_by(x, y, 1)


def fill_diagonal(grid, p0, p1):
    dx = step(p0.x, p1.x, 1)
    dy = step(p0.y, p1.y, 1)
    x, y = p0.tuple()
    grid.increment_by(x, y, 1)
    while (x, y) != p1.tuple():
        x += dx
        y += dy
        grid.increment_by(x, y, 1)


def fill_line(grid, p0, p1, go_diagonal=False):
    # draw the segment into the grid if it belongs to the requested pass.
    # returns True when the grid was touched
    line_type = classify(p0, p1)
    if go_diagonal != (line_type == LinePattern.DIAGONAL):
        return False
    if line_type == LinePattern.VERTICAL:
        fill_column(grid, p0, p1)
    elif line_type == LinePattern.HORIZONTAL:
        fill_row(grid, p0, p1)
    else:
        fill_diagonal(grid, p0, p1)
    return True


def fill_grid(grid, points, go_diagonal=False):
    # each consecutive pair of points is one line
    filled = 0
    for p0, p1 in pairs(points):
        if fill_line(grid, p0, p1, go_diagonal):
            filled += 1
    return filled


def draw_line(grid, p0, p1, value=1):
    # draw any supported segment regardless of its type
    for point in line_points(p0, p1):
        grid.increment_by(point.x, point.y, value)
