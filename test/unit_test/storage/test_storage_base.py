import pytest

from artfolio.storage import build_object_name, sanitize_filename


@pytest.mark.parametrize(
    "filename, expected",
    [
        ("sunset.png", "sunset.png"),
        ("my sunset.png", "my_sunset.png"),
        ("../../etc/passwd", "passwd"),
        ("C:\\Users\\me\\art work.jpg", "art_work.jpg"),
        (".hidden", "hidden"),
        ("", "upload"),
    ],
)
def test_sanitize_filename(filename, expected):
    assert sanitize_filename(filename) == expected


def test_build_object_name_with_timestamp():
    assert build_object_name("my art.png", timestamp_ms=1700000000000) == "1700000000000-my_art.png"


def test_build_object_name_defaults_to_now():
    prefix, _, name = build_object_name("a.png").partition("-")
    assert prefix.isdigit()
    assert name == "a.png"
