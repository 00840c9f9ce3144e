import pytest

from userapi.services.sanitize import InvalidUsername, sanitize_username


def test_strips_surrounding_whitespace():
    assert sanitize_username("  Ann \n") == "Ann"


def test_escapes_html():
    assert sanitize_username("<b>Ann</b>") == "&lt;b&gt;Ann&lt;/b&gt;"


def test_escapes_ampersand_and_quotes():
    assert sanitize_username("""Tom & "Jerry" 'x'""") == "Tom &amp; &quot;Jerry&quot; &#x27;x&#x27;"


def test_keeps_inner_whitespace():
    assert sanitize_username(" John Doe ") == "John Doe"


@pytest.mark.parametrize("value", ["", "   ", "\t\n"])
def test_rejects_blank(value):
    with pytest.raises(InvalidUsername):
        sanitize_username(value)


def test_rejects_non_string():
    with pytest.raises(InvalidUsername):
        sanitize_username(42)
