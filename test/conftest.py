import pytest
from point import Point

EXAMPLE = """0,9 -> 5,9
8,0 -> 0,8
9,4 -> 3,4
2,2 -> 2,1
7,0 -> 7,4
6,4 -> 2,0
0,9 -> 2,9
3,4 -> 1,4
0,0 -> 8,8
5,5 -> 8,2
"""


@pytest.fixture
def example_text():
    return EXAMPLE


@pytest.fixture
def example_points():
    return [Point(0, 9), Point(5, 9), Point(8, 0), Point(0, 8), Point(9, 4), Point(3, 4),
            Point(2, 2), Point(2, 1), Point(7, 0), Point(7, 4), Point(6, 4), Point(2, 0),
            Point(0, 9), Point(2, 9), Point(3, 4), Point(1, 4), Point(0, 0), Point(8, 8),
            Point(5, 5), Point(8, 2)]


@pytest.fixture
def example_file(tmpdir, example_text):
    input_file = tmpdir.join("lines.txt")
    input_file.write(example_text)
    return str(input_file)
