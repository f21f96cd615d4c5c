from point import Point
from segments import Segments, parse_points


def test_parse_points(example_text, example_points):
    assert parse_points(example_text) == example_points


def test_malformed_tokens_are_dropped():
    points = parse_points("0,9 -> a,9\n1,1 -> 2,2\n-1,3 -> 4,4\n\n")
    assert points == [Point(0, 9), Point(1, 1), Point(2, 2), Point(4, 4)]
    # the dropped token shifts the pairing
    assert list(Segments(points)) == [(Point(0, 9), Point(1, 1)), (Point(2, 2), Point(4, 4))]


def test_segments_from_string(example_text):
    segments = Segments.from_string(example_text)
    assert len(segments) == 10
    assert list(segments)[0] == (Point(0, 9), Point(5, 9))
    assert list(segments)[-1] == (Point(5, 5), Point(8, 2))
    # iterating twice gives the same lines
    assert list(segments) == list(segments)


def test_segments_from_file(example_file, example_points):
    assert Segments.from_file(example_file).points == example_points


def test_max_dimensions(example_points):
    assert Segments(example_points).max_dimensions() == (9, 9)
    assert Segments([Point(3, 1), Point(3, 7)]).max_dimensions() == (3, 7)
    assert Segments().max_dimensions() == (0, 0)


def test_add_segment():
    segments = Segments()
    segments.add_segment(Point(0, 0), Point(3, 3))
    assert segments.num_segments == 1
    assert str(segments) == "0,0 -> 3,3\n"


def test_odd_point_is_ignored():
    segments = Segments([Point(0, 0), Point(3, 3), Point(1, 1)])
    assert len(segments) == 1
    assert list(segments) == [(Point(0, 0), Point(3, 3))]
