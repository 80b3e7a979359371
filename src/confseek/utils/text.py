"""
Lenient JSON text normalization.

Removes ``//`` and ``/* */`` comments and trailing commas so JSON files
written by hand still decode with ``json.loads``. String literals are never
modified.
"""

from __future__ import annotations


def _strip_comments(text: str) -> str:
    out: list[str] = []
    i = 0
    n = len(text)
    in_string = False
    while i < n:
        ch = text[i]
        if in_string:
            out.append(ch)
            if ch == "\\" and i + 1 < n:
                out.append(text[i + 1])
                i += 2
                continue
            if ch == '"':
                in_string = False
            i += 1
            continue

        if ch == '"':
            in_string = True
            out.append(ch)
            i += 1
        elif text.startswith("//", i):
            # Keep the newline so line structure survives
            end = text.find("\n", i)
            if end == -1:
                break
            i = end
        elif text.startswith("/*", i):
            end = text.find("*/", i + 2)
            if end == -1:
                break
            out.append(" ")
            i = end + 2
        else:
            out.append(ch)
            i += 1
    return "".join(out)


def _strip_trailing_commas(text: str) -> str:
    out: list[str] = []
    i = 0
    n = len(text)
    in_string = False
    while i < n:
        ch = text[i]
        if in_string:
            out.append(ch)
            if ch == "\\" and i + 1 < n:
                out.append(text[i + 1])
                i += 2
                continue
            if ch == '"':
                in_string = False
            i += 1
            continue

        if ch == '"':
            in_string = True
        elif ch == ",":
            j = i + 1
            while j < n and text[j].isspace():
                j += 1
            if j < n and text[j] in "}]":
                i += 1
                continue
        out.append(ch)
        i += 1
    return "".join(out)


def normalize_json_text(raw: str) -> str:
    """
    Normalize lenient JSON text so the standard decoder accepts it.

    Comments are removed first, then commas directly before ``}`` or ``]``
    (whitespace in between allowed), then surrounding whitespace. Applying
    the function to its own output returns the same text.

    Args:
        raw: File contents

    Returns:
        Normalized text
    """
    text = _strip_comments(raw)
    # Repeat until stable: "[1,,]" loses one comma per pass
    while True:
        stripped = _strip_trailing_commas(text)
        if stripped == text:
            break
        text = stripped
    return text.strip()
