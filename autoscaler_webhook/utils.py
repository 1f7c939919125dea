import re
from typing import Optional

_INT_PREFIX = re.compile(r'^\s*([+-]?[0-9]+)')


def string_truncate(text, limit):
    """Cut ``text`` to ``limit`` characters, ending with an ellipsis when shortened."""
    if text is None:
        return ''
    text = str(text)
    if len(text) > limit:
        return text[:limit - 3] + '...'
    return text


def strip_trailing_slash(url):
    if url and url.endswith('/'):
        return url[:-1]
    return url


def is_true(value) -> bool:
    if value is None:
        return False
    return str(value).strip().lower() == 'true'


def is_present(value) -> bool:
    return value is not None and str(value) != ''


def parse_int_prefix(value) -> Optional[int]:
    # "3", " 3", "3abc" -> 3; "abc", "" -> None
    if value is None:
        return None
    match = _INT_PREFIX.match(str(value))
    if not match:
        return None
    return int(match.group(1))


def equals_number(value, number) -> bool:
    if value is None:
        return False
    text = str(value).strip()
    if text == '':
        return number == 0
    try:
        return float(text) == number
    except ValueError:
        return False


def text_or_empty(value) -> str:
    return '' if value is None else str(value)
