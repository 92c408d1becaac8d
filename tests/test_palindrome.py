import pytest

from hwkit.palindrome import is_palindrome, strip_spaces


def test_phrase_with_spaces_is_palindrome():
    assert is_palindrome("я иду с мечем судия") is True


def test_non_palindrome():
    assert is_palindrome("abcd fg") is False


def test_strip_spaces_removes_only_spaces():
    assert strip_spaces("abcd fg") == "abcdfg"
    assert strip_spaces("a\tb") == "a\tb"


def test_strip_spaces_of_blank_is_empty():
    assert strip_spaces("   ") == ""


def test_empty_and_blank_are_palindromes():
    assert is_palindrome("") is True
    assert is_palindrome("   ") is True


@pytest.mark.parametrize("word", ["abc", "hello world", "ab cd"])
def test_reversed_concatenation_is_palindrome(word):
    assert is_palindrome(word + word[::-1]) is True


def test_stripped_result_has_no_spaces():
    assert " " not in strip_spaces("я иду с мечем судия")