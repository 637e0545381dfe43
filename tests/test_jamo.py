import pytest

from hangulize.jamo import compose_hangul


@pytest.mark.parametrize(
    "jamo, expected",
    [
        ("ㅎㅏ-ㄴㄱㅡ-ㄹ", "한글"),
        ("ㄲㅣ-ㅇㄲㅏ-ㅇ", "낑깡"),
    ],
)
def test_compose_hangul(jamo, expected):
    assert compose_hangul(jamo) == expected


def test_compose_hangul_on_composed():
    assert compose_hangul("한글") == "한글"
    assert compose_hangul("하-ㄴ글ㄹㅏ이ㅈ") == "한글라이즈"


def test_compose_hangul_non_hangul():
    assert compose_hangul("Hello, world") == "Hello, world"
    assert compose_hangul("ㅇㅏ-ㄴㄴㅕ-ㅇ, world") == "안녕, world"


def test_compose_hangul_perfect():
    assert compose_hangul("ㅎㅏ-ㄴㄱㅡ-ㄹㄹㅏㅇㅣㅈㅡ") == "한글라이즈"


def test_compose_hangul_interpolation():
    assert compose_hangul("ㅗㅈ") == "오즈"


def test_compose_hangul_empty():
    assert compose_hangul("") == ""