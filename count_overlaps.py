import argparse

from overlap import OverlapCounter
from overlap_utils import plot_overlaps, segments_to_svg, write_debug
from segments import Segments

parser = argparse.ArgumentParser(
    description='Count the points where at least two lines overlap')
parser.add_argument('--filename', type=str, required=True,
                    help='The input file, one "x0,y0 -> x1,y1" line per row.')
parser.add_argument('--plot', dest="plot", action="store_true",
                    help="Save a heatmap of the grid")
parser.add_argument('--svg', dest="svg", type=str, default=None,
                    help="Draw the lines to this svg file")


def count_overlaps(segments):
    counter = OverlapCounter(segments)
    count_straight, count_all = counter.run()
    return counter, count_straight, count_all


def main(argv=None):
    args = parser.parse_args(argv)
    segments = Segments.from_file(args.filename)
    counter, count_straight, count_all = count_overlaps(segments)

    print("Count of overlaps for straight lines: {}".format(count_straight))
    print("Count of overlaps for all lines: {}".format(count_all))

    write_debug("overlaps", counter.grid, segments)
    if args.plot:
        print("heatmap saved to", plot_overlaps(counter.grid, segments, override=True))
    if args.svg:
        print("lines drawn to", segments_to_svg(segments, args.svg))
    return count_straight, count_all


if __name__ == "__main__":
    main()
