"""String and path-segment helpers.

Filename helpers split on dots and skip empty fields, so a hidden file
such as ``.gitkeep`` has the name ``gitkeep`` and no extension, and
``a.b.c.txt`` has the name ``a`` and the extension ``b``.
"""

import re
import string

# Both separators are accepted regardless of platform
_PATH_SEPARATORS = "/\\"

_SPECIAL_CHARS = re.compile(r"[\s\x00-\x1f\x7f" + re.escape(string.punctuation) + "]")


def split_string(text: str | None, separator: str = ":") -> list[str] | None:
    """Split a string on any of the separator characters.

    Empty fields are dropped, so leading, trailing and repeated
    separators produce nothing.

    Args:
        text: The string to split.
        separator: One or more characters to split on.

    Returns:
        The non-empty fields, or None if text is not a string.
    """
    if not isinstance(text, str):
        return None
    pattern = f"[^{re.escape(separator)}]+"
    return re.findall(pattern, text)


def split_path(path: str) -> list[str]:
    """Split a path into its segments, accepting both / and \\."""
    return split_string(path, _PATH_SEPARATORS) or []


def get_filename_from_path(path: str) -> str | None:
    """Extract the final segment of a path.

    Returns:
        The filename, or None if the path has no segments.
    """
    segments = split_path(path)
    return segments[-1] if segments else None


def remove_filename_from_path(path: str) -> str:
    """Drop the final segment of a path, keeping the trailing separator.

    ``"sfx/ui/click.wav"`` becomes ``"sfx/ui/"``; a bare filename
    becomes ``""``.
    """
    cut = max(path.rfind(sep) for sep in _PATH_SEPARATORS)
    return path[: cut + 1]


def get_extension_from_filename(filename: str) -> str | None:
    """Extract the extension from a filename.

    Only the second dot-delimited field is returned, so multi-dot
    names yield their first suffix: ``a.b.c.txt`` gives ``b``.

    Returns:
        The extension, or None if the filename has no dot-delimited suffix.
    """
    fields = split_string(filename, ".") or []
    return fields[1] if len(fields) > 1 else None


def get_file_from_filename(filename: str) -> str | None:
    """Extract the name part of a filename (text before the first dot).

    Returns:
        The name, or None if the filename consists only of dots.
    """
    fields = split_string(filename, ".") or []
    return fields[0] if fields else None


def count_words(text: str) -> int:
    """Count whitespace-separated words in a string."""
    return len(text.split())


def remove_whitespace(text: str) -> str:
    """Remove all whitespace from a string."""
    return re.sub(r"\s+", "", text)


def trim_whitespace(text: str) -> str:
    """Trim leading and trailing whitespace from a string."""
    return text.strip()


def capitalise_first_letter(text: str) -> str:
    """Uppercase the first character of a string."""
    return text[:1].upper() + text[1:]


def decapitalise_first_letter(text: str) -> str:
    """Lowercase the first character of a string."""
    return text[:1].lower() + text[1:]


def split_camel_case(text: str) -> str:
    """Split a camelCase string into capitalised words.

    ``"playerHealthBar"`` becomes ``"Player Health Bar"``.
    """
    spaced = re.sub(r"[A-Z]", lambda m: " " + m.group(0), text)
    return capitalise_first_letter(spaced)


def to_camel_case(text: str) -> str:
    """Convert space-separated words to camelCase.

    Whitespace is removed and the first letter lowercased, so
    ``"Player Health Bar"`` becomes ``"playerHealthBar"``.
    """
    return decapitalise_first_letter(remove_whitespace(text))


def remove_special_chars(text: str) -> str:
    """Remove punctuation, control characters and whitespace."""
    return _SPECIAL_CHARS.sub("", text)


def replace_special_characters_in_string(text: str | None, what: str, with_: str) -> str | None:
    """Replace every literal occurrence of a substring.

    No pattern characters are interpreted in either argument.

    Returns:
        The edited string, or None if text is not a string.
    """
    if not isinstance(text, str):
        return None
    return text.replace(what, with_)


def is_alpha_numeric(text: str) -> bool:
    """Check if a string contains only ASCII letters and digits."""
    return re.search(r"[^A-Za-z0-9]", text) is None
