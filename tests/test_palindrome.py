import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.palindrome import is_palindrome, is_palindrome_two_stacks, main

PALINDROMES = ["", "a", "abba", "abcba"]
NON_PALINDROMES = ["ab", "abca", "xbcby"]


@pytest.mark.parametrize("text", PALINDROMES)
def test_known_palindromes(text):
    assert is_palindrome(text) is True


@pytest.mark.parametrize("text", PALINDROMES)
def test_known_palindromes_two_stacks(text):
    assert is_palindrome_two_stacks(text) is True


@pytest.mark.parametrize("text", NON_PALINDROMES)
def test_known_non_palindromes(text):
    assert is_palindrome(text) is False


@pytest.mark.parametrize("text", NON_PALINDROMES)
def test_known_non_palindromes_two_stacks(text):
    assert is_palindrome_two_stacks(text) is False


@given(half=st.text(), middle=st.text(max_size=1))
def test_mirrored_text_is_palindrome(half, middle):
    assert is_palindrome(half + middle + half[::-1]) is True


@given(half=st.text(), middle=st.text(max_size=1))
def test_mirrored_text_is_palindrome_two_stacks(half, middle):
    assert is_palindrome_two_stacks(half + middle + half[::-1]) is True


@given(st.text())
def test_checks_agree_and_match_reversal(text):
    result = is_palindrome(text)
    assert is_palindrome_two_stacks(text) == result
    assert result == is_palindrome(text[::-1])


def test_main_palindrome(capsys):
    assert main(["abba"]) == 0
    assert capsys.readouterr().out == "Palindrome\n"


def test_main_not_palindrome(capsys):
    assert main(["abc"]) == 0
    assert capsys.readouterr().out == "Not Palindrome\n"


def test_main_without_argument(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == "Please provide a string as an argument.\n"