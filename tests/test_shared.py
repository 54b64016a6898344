import pytest

from drillkit.lessons.shared import (
    Cons,
    create_empty_list,
    create_non_empty_list,
    offset_sums,
    run_jobs,
)


def test_create_empty_list():
    assert create_empty_list() is None


def test_create_non_empty_list():
    assert create_empty_list() != create_non_empty_list()
    assert create_non_empty_list() == Cons(0, None)


def test_cons_iteration():
    assert list(Cons(1, Cons(2, Cons(3)))) == [1, 2, 3]
    assert list(create_non_empty_list()) == [0]


def test_offset_sums_cover_all_numbers():
    numbers = list(range(100))
    sums = offset_sums(numbers, 8)
    assert len(sums) == 8
    assert sum(sums) == 4950


def test_offset_sums_small():
    assert offset_sums([1, 2, 3, 4], 2) == [4, 6]


def test_offset_sums_single_worker():
    assert offset_sums([5, 6, 7], 1) == [18]


def test_offset_sums_more_workers_than_numbers():
    assert offset_sums([3, 4], 4) == [3, 4, 0, 0]


def test_offset_sums_needs_a_worker():
    with pytest.raises(ValueError):
        offset_sums([1, 2, 3], 0)


def test_run_jobs_without_jobs_never_waits(capsys):
    assert run_jobs(0, 0.0, 0.01) == 0
    assert capsys.readouterr().out == ""


def test_run_jobs_reports_each_poll(capsys):
    polls = run_jobs(4, 0.02, 0.005)
    out = capsys.readouterr().out
    assert polls >= 1
    assert out.count("waiting... \n") == polls


def test_run_jobs_rejects_negative():
    with pytest.raises(ValueError):
        run_jobs(-1, 0.0, 0.0)