"""Pattern matcher tests — validators and extractors over free text.

Tests cover:
    - 24-hour clock bounds, single-digit hour/minute
    - Date separators must agree
    - Color extraction order and casing
    - http(s) prefix vs protocol-relative URLs
    - Exactly three version groups
    - <img> src extraction (absolute and protocol-relative only)
"""

import pytest

from jutils.core.match_text import (
    has_http_protocol,
    is_24_hour_time,
    is_date,
    is_version,
    match_colors,
    match_imgs,
)


# --- is_24_hour_time ----------------------------------------------------------

@pytest.mark.parametrize("text", ["01:14", "1:1", "0:00", "23:59", "19:05"])
def test_valid_24_hour_times(text):
    assert is_24_hour_time(text)


@pytest.mark.parametrize("text", ["23:60", "24:00", "1:", "123:00", "01:14\n", ""])
def test_invalid_24_hour_times(text):
    assert not is_24_hour_time(text)


# --- is_date ------------------------------------------------------------------

@pytest.mark.parametrize("text", ["2021-08-22", "2021/08/22", "2021.08.22"])
def test_valid_dates(text):
    assert is_date(text)


@pytest.mark.parametrize("text", [
    "2021.08/22", "2021/08-22", "2021-13-01", "2021-00-10", "2021-08-32", "21-08-22",
])
def test_invalid_dates(text):
    assert not is_date(text)


# --- match_colors -------------------------------------------------------------

def test_match_colors_in_order_with_original_casing():
    text = "#12f3a1 #ffBabd #FFF #123 #586"
    assert match_colors(text) == ["#12f3a1", "#ffBabd", "#FFF", "#123", "#586"]


def test_match_colors_in_css():
    css = "a { color: #fff; background: #00AA00 } b { border: 1px solid red }"
    assert match_colors(css) == ["#fff", "#00AA00"]


def test_match_colors_none():
    assert match_colors("no colors here #zz") == []


# --- has_http_protocol --------------------------------------------------------

@pytest.mark.parametrize("text,expected", [
    ("https://google.com/", True),
    ("http://google.com/", True),
    ("https://x/", True),
    ("//google.com/", False),
    ("//x/", False),
    ("ftp://x/", False),
    ("see https://x/", False),
])
def test_has_http_protocol(text, expected):
    assert has_http_protocol(text) is expected


# --- is_version ---------------------------------------------------------------

@pytest.mark.parametrize("text,expected", [
    ("1.1.1", True),
    ("1.000.1", True),
    ("10.20.30", True),
    ("1.000.1.1", False),
    ("1.1", False),
    ("1.1.1-beta", False),
    ("v1.1.1", False),
])
def test_is_version(text, expected):
    assert is_version(text) is expected


# --- match_imgs ---------------------------------------------------------------

def test_match_imgs_absolute_and_protocol_relative():
    html = (
        '<p>intro</p>'
        '<img alt="a" src="https://cdn.example.com/a.png">'
        '<IMG src="//cdn.example.com/b.jpg" width="10"/>'
        '<img src="http://example.com/c.gif" />'
    )
    assert match_imgs(html) == [
        "https://cdn.example.com/a.png",
        "//cdn.example.com/b.jpg",
        "http://example.com/c.gif",
    ]


def test_match_imgs_skips_relative_and_single_quoted():
    html = "<img src=\"/local.png\"><img src='https://x/y.png'>"
    assert match_imgs(html) == []


def test_match_imgs_empty_html():
    assert match_imgs("") == []
