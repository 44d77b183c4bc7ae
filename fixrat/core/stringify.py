# SPDX-FileCopyrightText: 2025 fixrat contributors
# SPDX-License-Identifier: Apache-2.0

"""
Readable one-line (or indented) representations of arbitrary values for
error and log messages.

Differences to repr():

- Floats never look like integers; infinities are shown as ∞ / -∞.
- Lists and tuples are shown as [a, b], dicts as [key => value].
- Objects with their own __str__ are shown using it. Other objects are shown
  like an HTML tag with their attributes, e.g. <pkg.Point +x = 1, -_y = 2>
  ('+' public, '-' private attribute).
"""

import json
from public import public
from .numeric import float_to_string

@public
def stringify(value, pretty_print: bool=False, indent_level: int=0) -> str:
    if value is None or isinstance(value, (bool, int, str)):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, float):
        return float_to_string(value)
    if isinstance(value, (list, tuple, dict)):
        return _stringify_collection(value, pretty_print, indent_level, set())
    return _stringify_object(value, pretty_print, indent_level)

def _stringify_collection(value, pretty_print, indent_level, seen):
    if id(value) in seen:
        raise ValueError("Cannot stringify collections containing circular references.")
    seen = seen | {id(value)}

    def item_str(item):
        if isinstance(item, (list, tuple, dict)):
            return _stringify_collection(item, pretty_print, indent_level + 1, seen)
        return stringify(item, pretty_print, indent_level + 1)

    indent = ' ' * 4 * (indent_level + 1) if pretty_print else ''
    if isinstance(value, dict):
        pairs = [f"{indent}{item_str(k)} => {item_str(v)}" for k, v in value.items()]
    else:
        pairs = [f"{indent}{item_str(v)}" for v in value]

    if pretty_print:
        brace_indent = ' ' * 4 * indent_level
        return "[\n" + ",\n".join(pairs) + f"\n{brace_indent}]"
    return "[" + ", ".join(pairs) + "]"

def _stringify_object(obj, pretty_print, indent_level):
    cls = type(obj)
    if cls.__str__ is not object.__str__:
        return str(obj)

    name = f"{cls.__module__}.{cls.__qualname__}"
    attrs = getattr(obj, '__dict__', {})
    if not attrs:
        return f"<{name}>"

    indent = ' ' * 4 * (indent_level + 1) if pretty_print else ''
    pairs = []
    for key, value in attrs.items():
        vis = '-' if key.startswith('_') else '+'
        pairs.append(f"{indent}{vis}{key} = {stringify(value, pretty_print, indent_level + 1)}")

    if pretty_print:
        return f"<{name}\n" + ",\n".join(pairs) + ">"
    return f"<{name} " + ", ".join(pairs) + ">"

@public
def abbrev(value, max_len: int=20) -> str:
    """Short representation of value, cut to max_len characters ending in '...'."""
    result = stringify(value)
    if max_len > 4 and len(result) > max_len:
        result = result[:max_len - 3] + '...'
    return result
