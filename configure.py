from os.path import join, dirname, abspath

# set PLOTTING to True to save a heatmap of the grid after a run
PLOTTING = False
# DEBUG writes svg snapshots of the overlapping cells
DEBUG = False

OUTPUT_DIRECTORY = join(dirname(abspath(__file__)), "output")

# the token separating the two endpoints of a segment in the input file
ARROW = " -> "

# a cell is an overlap when more than this many segments pass through it
OVERLAP_THRESHOLD = 1

CELL_DTYPE = "int64"

# colors are css names, resolved with webcolors
STRAIGHT_COLOR = "steelblue"
DIAGONAL_COLOR = "darkorange"
OVERLAP_COLOR = "crimson"

# pixels per lattice cell in the svg output
CELL_SIZE = 10
