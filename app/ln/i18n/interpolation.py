"""Placeholder handling for %name% variables.

Placeholders are protected with opaque markers before text goes to the
translation service, restored afterwards, and finally substituted with
caller-provided values.
"""

import re
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

# Any run of non-blank characters between two percent signs: %user%,
# %first-name%, %user.name%. A lone "100%" is not a placeholder.
PLACEHOLDER_PATTERN = re.compile(r"%([^%\s]+)%")
MARKER_TEMPLATE = "{{{{PH_{index}}}}}"


def find_placeholders(text: str, names: Optional[Iterable[str]] = None) -> list:
    """Return unique placeholder tokens (e.g. "%user%") found in text.

    Tokens for ``names`` present in the text come first, in the given order,
    followed by any other %name% token in order of appearance.
    """
    found = []
    for name in names or ():
        token = f"%{name}%"
        if token in text and token not in found:
            found.append(token)
    for match in PLACEHOLDER_PATTERN.finditer(text):
        token = match.group(0)
        if token not in found:
            found.append(token)
    return found


def protect_placeholders(
    text: str, names: Optional[Iterable[str]] = None
) -> Tuple[str, Dict[str, str]]:
    """Replace each %name% placeholder with a numbered marker.

    Args:
        text: Source text.
        names: Variable names to protect even when they contain characters
            the placeholder pattern does not match (such as spaces).

    Returns:
        Tuple of (protected text, {marker: original placeholder}).

    Example:
        >>> protect_placeholders("Hello %user%")
        ('Hello {{PH_0}}', {'{{PH_0}}': '%user%'})
    """
    markers: Dict[str, str] = {}
    for index, token in enumerate(find_placeholders(text, names)):
        marker = MARKER_TEMPLATE.format(index=index)
        markers[marker] = token
        text = text.replace(token, marker)
    return text, markers


def restore_placeholders(text: str, markers: Mapping[str, str]) -> str:
    """Put original placeholders back in place of their markers."""
    for marker, token in markers.items():
        text = text.replace(marker, token)
    return text


def substitute_variables(
    text: str, variables: Optional[Mapping[str, Any]] = None
) -> str:
    """Replace every %name% occurrence with its value.

    Non-string values are converted with ``str()``. ``None`` values are
    skipped, as are names with no value; those placeholders stay literal.
    Names are applied one after another in mapping order, so a value that
    itself contains %other% is substituted by a later ``other`` entry.

    Args:
        text: Resolved text with %name% placeholders.
        variables: Mapping of name -> value.

    Returns:
        Text with known placeholders substituted.
    """
    if not variables:
        return text
    for name, value in variables.items():
        if value is None:
            continue
        text = text.replace(f"%{name}%", str(value))
    return text
