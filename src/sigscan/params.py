"""Parameter list splitting and name extraction."""

import re

_OPENERS = "<[("
_CLOSERS = ">])"

# Leading/trailing characters that are neither alphanumeric nor underscore
_EDGE_PUNCTUATION = re.compile(r"^\W+|\W+$")


def split_params(raw: str) -> list[str]:
    """Split a raw parameter list on top-level commas.

    Nesting is tracked across <>, [] and (), so commas inside generic
    arguments, subscripts or default-value calls do not split. Fields are
    trimmed; empty fields and the literal "void" are dropped.

    Args:
        raw: Text between a signature's parentheses

    Returns:
        Trimmed parameter fields in source order
    """
    fields = []
    current = []
    depth = 0

    for ch in raw:
        if ch in _OPENERS:
            depth += 1
        elif ch in _CLOSERS:
            depth -= 1
        elif ch == "," and depth == 0:
            fields.append("".join(current))
            current = []
            continue
        current.append(ch)
    fields.append("".join(current))

    return [f.strip() for f in fields if f.strip() and f.strip() != "void"]


def declaration_side(field: str) -> str:
    """Return the part of a parameter field before its annotation or default.

    Stops at the first top-level ":" (but not "::") or "=".
    """
    depth = 0
    length = len(field)
    for i, ch in enumerate(field):
        if ch in _OPENERS:
            depth += 1
        elif ch in _CLOSERS:
            depth -= 1
        elif depth == 0 and ch == "=":
            return field[:i]
        elif depth == 0 and ch == ":":
            prev_colon = i > 0 and field[i - 1] == ":"
            next_colon = i + 1 < length and field[i + 1] == ":"
            if not prev_colon and not next_colon:
                return field[:i]
    return field


def strip_punctuation(token: str) -> str:
    return _EDGE_PUNCTUATION.sub("", token)


def parameter_names(raw: str, split_words: bool = False) -> list[str]:
    """Extract parameter names from a brace-family parameter list.

    Each field is reduced to its declaration side and the last whitespace
    token, stripped of edge punctuation, is kept as the name; a leading
    type such as "int x" or "String[] args" is discarded.

    With `split_words`, every whitespace token of the field is kept instead.
    Go declares the name before the type, so "id int" yields both "id" and
    "int".

    Args:
        raw: Text between a signature's parentheses
        split_words: Keep every token rather than only the last one

    Returns:
        Parameter names in source order
    """
    names = []
    for param in split_params(raw):
        if split_words:
            tokens = param.split()
        else:
            tokens = declaration_side(param).split()[-1:]
        for token in tokens:
            name = strip_punctuation(token)
            if name:
                names.append(name)
    return names
