# core/utils/codec.py
"""Reversible backslash escaping for free-text columns.

Accented Latin letters and the characters ' " \\ - are stored with a
leading backslash. Contact lists (emails, phones) are stored as a JSON
array of escaped strings in a single text column, written compactly
with non-ASCII characters kept as-is.
"""
import json
import re
from typing import Iterable, List

from sqlalchemy import String, Text
from sqlalchemy.types import TypeDecorator

ACCENTED = "áàãâäéèêëíìîïóòõôöúùûüçÁÀÃÂÄÉÈÊËÍÌÎÏÓÒÕÔÖÚÙÛÜÇ"
PUNCTUATION = "'\"\\-"

_ESCAPE_RE = re.compile("[" + re.escape(ACCENTED + PUNCTUATION) + "]")
_UNESCAPE_RE = re.compile(r"\\([" + re.escape(ACCENTED + PUNCTUATION) + "])")


class ContactListDecodeError(ValueError):
    """Raised when a stored contact list is not a JSON array of strings."""


def escape(text: str) -> str:
    """Prefix every recognized character with a backslash."""
    return _ESCAPE_RE.sub(lambda m: "\\" + m.group(0), text)


def unescape(text: str) -> str:
    """Inverse of escape. Unrecognized backslash sequences are left as-is."""
    return _UNESCAPE_RE.sub(lambda m: m.group(1), text)


def encode_list(values: Iterable[str]) -> str:
    return json.dumps([escape(value) for value in values], ensure_ascii=False, separators=(",", ":"))


def decode_list(text: str) -> List[str]:
    """Decode a stored contact list back into plain strings.

    Args:
        text: JSON array of escaped strings

    Returns:
        The unescaped values in stored order

    Raises:
        ContactListDecodeError: If text is not a JSON array of strings
    """
    try:
        values = json.loads(text)
    except (TypeError, json.JSONDecodeError) as e:
        raise ContactListDecodeError(f"Invalid contact list {text!r}: {e}") from e
    if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
        raise ContactListDecodeError(f"Contact list is not an array of strings: {text!r}")
    return [unescape(value) for value in values]


class EscapedText(TypeDecorator):
    """String column stored in escaped form and read back unescaped"""
    impl = String
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return escape(value)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return unescape(value)


class EscapedList(TypeDecorator):
    """List of strings stored as a JSON array of escaped values"""
    impl = Text
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return encode_list(value)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return decode_list(value)
