"""Tests for API dependency helpers."""

import pytest

from api.dependencies import extract_bearer_token


@pytest.mark.parametrize(
    "header,expected",
    [
        ("Bearer abc.def.ghi", "abc.def.ghi"),
        ("bearer abc", "abc"),
        ('Bearer {"id": "1", "name": "A B"}', '{"id": "1", "name": "A B"}'),
        ("abc", None),
        ("Basic dXNlcjpwYXNz", None),
        ("Bearer    ", None),
        ("", None),
        (None, None),
    ],
)
def test_extract_bearer_token(header, expected):
    assert extract_bearer_token(header) == expected
