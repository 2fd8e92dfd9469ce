"""Comment stripping for JSON-with-comments (VS Code settings format)."""
from __future__ import annotations


def _blank(chunk: str) -> str:
    # Keep newlines so line/column numbers in parse errors stay accurate.
    return "".join(ch if ch in "\r\n" else " " for ch in chunk)


def strip_json_comments(text: str) -> str:
    """Replace ``//`` and ``/* */`` comments outside strings with whitespace.

    The result has the same length as ``text``. An unterminated block
    comment runs to the end of the input; trailing commas are left alone.
    """
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
            continue
        pair = text[i:i + 2]
        if pair == "//":
            end = i
            while end < n and text[end] not in "\r\n":
                end += 1
            out.append(_blank(text[i:end]))
            i = end
            continue
        if pair == "/*":
            close = text.find("*/", i + 2)
            end = n if close == -1 else close + 2
            out.append(_blank(text[i:end]))
            i = end
            continue
        out.append(ch)
        i += 1
    return "".join(out)
