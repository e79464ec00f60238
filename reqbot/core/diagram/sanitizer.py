"""
Label sanitization for flowchart markup.

Dependencies: None
System role: Strips characters reserved by the markup from node and edge labels
"""

RESERVED_LABEL_CHARS = frozenset('"()')

_STRIP_TABLE = str.maketrans({char: None for char in RESERVED_LABEL_CHARS})


def sanitize_label(label: str) -> str:
    """
    Remove double quotes and parentheses from a label.

    Every other character is kept as-is, so the function is idempotent:
    sanitize_label(sanitize_label(x)) == sanitize_label(x).

    Args:
        label: Raw label text from the diagram structure

    Returns:
        str: Label safe to place inside a quoted vertex or edge label
    """
    return label.translate(_STRIP_TABLE)
