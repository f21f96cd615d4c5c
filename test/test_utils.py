import pytest
from utils import min_max, pairs, step


@pytest.mark.parametrize('test_data',
                         [{'name': 'forward', 'old': 2, 'new': 5, 'magnitude': 1, 'step': 1},
                          {'name': 'backward', 'old': 5, 'new': 2, 'magnitude': 1, 'step': -1},
                          {'name': 'equal', 'old': 3, 'new': 3, 'magnitude': 1, 'step': -1},
                          {'name': 'fixed axis', 'old': 3, 'new': 3, 'magnitude': 0, 'step': 0},
                          {'name': 'larger', 'old': 0, 'new': 10, 'magnitude': 2, 'step': 2},
                          ])
def test_step(test_data):
    assert step(test_data['old'], test_data['new'], test_data['magnitude']) == test_data['step']


def test_step_reaches_target():
    x = 9
    dx = step(9, 0)
    for _ in range(9):
        x += dx
    assert x == 0


def test_min_max():
    assert min_max(4, 1) == (1, 4)
    assert min_max(1, 4) == (1, 4)
    assert min_max(3, 3) == (3, 3)


def test_pairs():
    assert list(pairs([1, 2, 3, 4])) == [(1, 2), (3, 4)]
    # the unpaired last element is dropped
    assert list(pairs([1, 2, 3])) == [(1, 2)]
    assert list(pairs([])) == []
