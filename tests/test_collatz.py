import pytest

from coursebook.collatz import collatz_length, main


def test_collatz_length():
    assert collatz_length(11) == 15


def test_collatz_length_of_one():
    assert collatz_length(1) == 1


@pytest.mark.parametrize("n", [0, -5])
def test_non_positive_start_has_length_one(n):
    assert collatz_length(n) == 1


@pytest.mark.parametrize("k", range(1, 12))
def test_powers_of_two(k):
    assert collatz_length(2**k) == k + 1


@pytest.mark.parametrize("n", [3, 7, 11, 27])
def test_odd_step_consistency(n):
    assert collatz_length(n) == collatz_length(3 * n + 1) + 1


def test_main_prints_length(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "Length: 15\n"