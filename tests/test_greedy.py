import pytest

from algoshelf.greedy import DEFAULT_DENOMINATIONS, Job, greedy_change, job_sequence

JOBS = [
    Job("a", 2, 100),
    Job("b", 1, 19),
    Job("c", 2, 27),
    Job("d", 1, 25),
    Job("e", 3, 15),
]


def test_job_sequence_example():
    assert [job.name for job in job_sequence(JOBS)] == ["c", "a", "e"]


def test_job_sequence_fits_within_deadlines():
    chosen = job_sequence(JOBS)
    assert len(chosen) <= max(job.deadline for job in JOBS)
    for slot, job in enumerate(chosen, start=1):
        assert slot <= job.deadline or len(chosen) < slot


def test_job_sequence_keeps_all_when_deadlines_distinct():
    jobs = [Job("x", 3, 5), Job("y", 1, 7), Job("z", 2, 1)]
    assert job_sequence(jobs) == [jobs[1], jobs[2], jobs[0]]


def test_job_sequence_empty():
    assert job_sequence([]) == []


def test_job_sequence_rejects_zero_deadline():
    with pytest.raises(ValueError):
        job_sequence([Job("x", 0, 5)])


def test_greedy_change_documented_example():
    assert greedy_change(153) == [100, 50, 2, 1]


@pytest.mark.parametrize("amount", [0, 1, 7, 99, 153, 1888, 2500])
def test_greedy_change_sums_to_amount(amount):
    change = greedy_change(amount)
    assert sum(change) == amount
    assert change == sorted(change, reverse=True)
    assert set(change) <= set(DEFAULT_DENOMINATIONS)


def test_greedy_change_custom_denominations():
    assert greedy_change(12, [5, 2]) == [5, 5, 2]


def test_greedy_change_unreachable():
    with pytest.raises(ValueError):
        greedy_change(4, [3])


def test_greedy_change_negative_amount():
    with pytest.raises(ValueError):
        greedy_change(-1)


def test_greedy_change_bad_denomination():
    with pytest.raises(ValueError):
        greedy_change(5, [0, 1])