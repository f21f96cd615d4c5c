"""Drawings and plots of a grid and the segments drawn on it"""
from os.path import join
from time import time

import svgwrite
from svgpathtools import Line, Path, wsvg
from webcolors import name_to_hex

from configure import CELL_SIZE, DEBUG, DIAGONAL_COLOR, OUTPUT_DIRECTORY, \
    OVERLAP_COLOR, OVERLAP_THRESHOLD, PLOTTING, STRAIGHT_COLOR
from rasterizer import LinePattern, classify

if PLOTTING:
    import matplotlib.pyplot as plt
else:
    plt = None


def segment_color(p0, p1):
    if classify(p0, p1) == LinePattern.DIAGONAL:
        return name_to_hex(DIAGONAL_COLOR)
    return name_to_hex(STRAIGHT_COLOR)


def to_complex(point, scale=CELL_SIZE):
    # the center of the cell, in svg coordinates
    return (point.x + 0.5) * scale + (point.y + 0.5) * scale * 1j


def segments_to_svg(segments, filename, scale=CELL_SIZE):
    paths = []
    colors = []
    for p0, p1 in segments:
        if p0 == p1:
            # svgpathtools can't draw a line with no length
            continue
        paths.append(Path(Line(start=to_complex(p0, scale), end=to_complex(p1, scale))))
        colors.append(segment_color(p0, p1))
    if len(paths) == 0:
        print("warning: there are no segments to draw")
        return None
    len_x, len_y = segments.max_dimensions()
    dimensions = ((len_x + 1) * scale, (len_y + 1) * scale)
    wsvg(paths, colors, filename=filename, stroke_widths=[scale / 5.0] * len(paths),
         dimensions=dimensions)
    return filename


def gen_filename(partial="grid", extension="svg"):
    return join(OUTPUT_DIRECTORY, "gen_%s_%s_.%s" % (partial, int(time() * 1000), extension))


def write_debug(partial, grid, segments=None, override=False, scale=CELL_SIZE):
    # write the overlapping cells (and optionally the segments) to an svg file
    if not override and not DEBUG:
        return None
    filename = gen_filename(partial)
    dwg = svgwrite.Drawing(filename, size=(grid.len_x * scale, grid.len_y * scale),
                           profile='tiny')
    for y in range(grid.len_y):
        for x, value in enumerate(grid.line(y)):
            if value > OVERLAP_THRESHOLD:
                dwg.add(dwg.rect(insert=(x * scale, y * scale), size=(scale, scale),
                                 fill=name_to_hex(OVERLAP_COLOR)))
    if segments is not None:
        for p0, p1 in segments:
            start = to_complex(p0, scale)
            end = to_complex(p1, scale)
            dwg.add(dwg.line(start=(start.real, start.imag), end=(end.real, end.imag),
                             stroke=segment_color(p0, p1)))
    dwg.save(pretty=False)
    return filename


def plot_overlaps(grid, segments=None, override=False):
    # save a heatmap of the grid values, with the segments on top
    if not override and not PLOTTING:
        return None
    pyplot = plt
    if pyplot is None:
        import matplotlib.pyplot as pyplot

    fig, ax = pyplot.subplots()
    heatmap = ax.pcolor(grid.rows(), cmap=pyplot.cm.Blues, vmin=0)
    cbar = pyplot.colorbar(heatmap)
    cbar.set_label('Lines per cell')
    if segments is not None:
        for p0, p1 in segments:
            ax.plot([p0.x + 0.5, p1.x + 0.5], [p0.y + 0.5, p1.y + 0.5], 'r--', alpha=0.5)
    ax.invert_yaxis()
    filename = join(OUTPUT_DIRECTORY, 'overlaps_{}.png'.format(time()))
    fig.savefig(filename)
    pyplot.close(fig)
    return filename
