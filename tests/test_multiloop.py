import itertools

import pytest

from aiutils.multiloop import MultiLoop, MultiLoopState


def enumerate_inner(n, limit, start=lambda ml: 0):
    ml = MultiLoop(n)
    seen = []
    while not ml.finished():
        while ml() < limit:
            if ml.inner_loop():
                seen.append(tuple(ml[i] for i in range(n)))
            ml.start_next_loop_at(start(ml))
        ml.next_loop()
    return seen


@pytest.mark.parametrize("n, limit", [(1, 4), (2, 3), (3, 2)])
def test_enumerates_cartesian_product(n, limit):
    assert enumerate_inner(n, limit) == list(itertools.product(range(limit), repeat=n))


def test_start_at_previous_value_gives_non_decreasing_tuples():
    seen = enumerate_inner(3, 3, start=lambda ml: ml())
    assert seen == list(itertools.combinations_with_replacement(range(3), 3))


def test_zero_loops_is_finished_at_once():
    assert MultiLoop(0).finished()


def test_initial_value():
    ml = MultiLoop(2, 5)
    assert ml() == 5
    assert ml.loop() == 0
    assert not ml.inner_loop()


def test_break_of_inner_loop():
    ml = MultiLoop(2)
    seen = []
    while not ml.finished():
        while ml() < 3:
            if ml.inner_loop():
                if ml() == 1:
                    ml.breaks(1)
                    break
                seen.append((ml[0], ml[1]))
            ml.start_next_loop_at(0)
        ml.next_loop()
    assert seen == [(0, 0), (1, 0), (2, 0)]


def test_break_out_of_two_loops():
    ml = MultiLoop(2)
    seen = []
    while not ml.finished():
        while ml() < 3:
            if ml.inner_loop():
                seen.append((ml[0], ml[1]))
                if ml() == 1:
                    ml.breaks(2)
                    break
            ml.start_next_loop_at(0)
        ml.next_loop()
    assert seen == [(0, 0), (0, 1)]
    assert ml.finished()


def test_end_of_loop_reports_finished_loops():
    ml = MultiLoop(2)
    ends = []
    while not ml.finished():
        while ml() < 3:
            ml.start_next_loop_at(0)
        ends.append(ml.end_of_loop())
        ml.next_loop()
    assert ends == [0, 0, 0, -1]


def test_breaks_zero_continues_current_loop():
    ml = MultiLoop(1)
    before = ml()
    ml.breaks(0)
    assert ml.end_of_loop() == -1
    ml.next_loop()
    assert not ml.finished()
    assert ml() == before + 1


def test_set_counter_and_setitem():
    ml = MultiLoop(2)
    ml.start_next_loop_at(0)
    ml.set_counter(7)
    assert ml() == 7
    assert ml[1] == 7
    ml[0] = 4
    assert ml(1) == 4


def test_state_round_trip():
    ml = MultiLoop(2)
    ml.start_next_loop_at(0)
    ml.start_next_loop_at(0)
    saved = ml.state()
    values = (ml[0], ml[1], ml.loop())
    ml.start_next_loop_at(0)
    ml.next_loop()
    ml.set_state(saved)
    assert (ml[0], ml[1], ml.loop()) == values
    assert isinstance(saved, MultiLoopState) and saved.counters == ml.state().counters


def test_state_is_a_copy():
    ml = MultiLoop(1)
    saved = ml.state()
    ml.set_counter(9)
    assert saved.counters != ml.state().counters
    assert saved.counters[1] == 0


def test_getitem_out_of_range():
    ml = MultiLoop(2)
    with pytest.raises(IndexError):
        ml[1]
    with pytest.raises(IndexError):
        ml(1)


def test_breaking_out_of_too_many_loops():
    ml = MultiLoop(2)
    with pytest.raises(ValueError):
        ml.breaks(2)
    ml.start_next_loop_at(0)
    with pytest.raises(ValueError):
        ml.breaks(3)


def test_negative_loop_count():
    with pytest.raises(ValueError):
        MultiLoop(-1)


def test_next_loop_after_finish():
    ml = MultiLoop(1)
    ml.next_loop()
    assert ml.finished()
    with pytest.raises(RuntimeError):
        ml.next_loop()