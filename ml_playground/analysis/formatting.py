import re
from typing import Optional

DEFAULT_TARGET_NAME = "Value"

_NON_ALPHANUMERIC = re.compile(r"[^a-zA-Z0-9 ]")


def format_target_name(column_name: Optional[str]) -> str:
    """
    Turns a raw column header into a display name: every character other than
    letters, digits and spaces becomes a space and each word is capitalised,
    e.g. ``"house_price($)"`` -> ``"House Price   "``.
    """
    if not column_name:
        return DEFAULT_TARGET_NAME

    cleaned = _NON_ALPHANUMERIC.sub(" ", column_name).replace("_", " ")
    return " ".join(word[:1].upper() + word[1:].lower() for word in cleaned.split(" "))
