from configure import CELL_DTYPE, DEBUG, OVERLAP_THRESHOLD
from grid import Grid
from rasterizer import LinePattern, draw_line, fill_grid, is_supported, matches


def overlaps_straight_lines(grid, points):
    # fills the grid with the vertical and horizontal lines only, and returns the
    # number of cells crossed by at least two lines
    fill_grid(grid, points, go_diagonal=False)
    return grid.count_over(OVERLAP_THRESHOLD)


def overlaps_diagonal_lines(grid, points):
    # adds the diagonal lines on top of whatever is already in the grid. after
    # overlaps_straight_lines this counts the overlaps of all the lines
    fill_grid(grid, points, go_diagonal=True)
    return grid.count_over(OVERLAP_THRESHOLD)


def overlap_lines(grid, segments, pattern=LinePattern.ALL):
    for p0, p1 in segments:
        if matches(pattern, p0, p1):
            draw_line(grid, p0, p1)
    return grid.count_over(OVERLAP_THRESHOLD)


class OverlapCounter(object):
    STRAIGHT_PASS = "straight"
    DIAGONAL_PASS = "diagonal"

    def __init__(self, segments, dtype=CELL_DTYPE):
        for p0, p1 in segments:
            if not is_supported(p0, p1):
                raise ValueError("cannot draw the line %s -> %s, only vertical, horizontal "
                                 "and 45 degree lines are supported" % (p0, p1))
        self.segments = segments
        len_x, len_y = segments.max_dimensions()
        # +1 because the first position is (0, 0)
        self.grid = Grid(len_x + 1, len_y + 1, 0, dtype=dtype)
        self.passes = []
        self.counts = []

    def _run_pass(self, name, go_diagonal):
        if name in self.passes:
            raise ValueError("the %s pass has already been run" % name)
        fill_grid(self.grid, self.segments.points, go_diagonal=go_diagonal)
        count = self.grid.count_over(OVERLAP_THRESHOLD)
        self.passes.append(name)
        self.counts.append(count)
        if DEBUG:
            print("%s pass: %s overlaps on a %s x %s grid" % (name, count, self.grid.len_x,
                                                               self.grid.len_y))
        return count

    def count_straight(self):
        return self._run_pass(self.STRAIGHT_PASS, go_diagonal=False)

    def count_diagonal(self):
        # the diagonal pass reuses the grid of the straight pass, so it has to
        # come second
        if self.STRAIGHT_PASS not in self.passes:
            raise ValueError("the straight pass must run before the diagonal pass")
        return self._run_pass(self.DIAGONAL_PASS, go_diagonal=True)

    def run(self):
        return self.count_straight(), self.count_diagonal()
