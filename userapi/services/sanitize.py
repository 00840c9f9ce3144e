import html


class InvalidUsername(ValueError):
    pass


def sanitize_username(value: str) -> str:
    """Trim surrounding whitespace and escape HTML-significant characters.

    Raises InvalidUsername when nothing is left after trimming; the input is
    never partially sanitized in that case.
    """
    if not isinstance(value, str):
        raise InvalidUsername("username must be a string")
    trimmed = value.strip()
    if not trimmed:
        raise InvalidUsername("username must not be empty")
    return html.escape(trimmed, quote=True)
