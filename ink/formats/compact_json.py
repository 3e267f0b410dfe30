"""
Compact JSON formatter for board files.

Arrays of primitives and flat objects (a placed tile record, for example)
are kept on a single line; everything else is indented normally.
"""

import json


def _is_primitive(value) -> bool:
    return value is None or isinstance(value, (bool, int, float, str))


def _is_flat(value) -> bool:
    if isinstance(value, list):
        return all(_is_primitive(x) for x in value)
    if isinstance(value, dict):
        return all(_is_primitive(x) for x in value.values())
    return False


def dumps(obj, indent=2):
    """
    Serialize obj to a JSON formatted string.

    Args:
        obj: The object to serialize
        indent: Number of spaces for indentation (default: 2)

    Returns:
        A formatted JSON string
    """

    def format_value(value, level):
        if _is_primitive(value) or _is_flat(value):
            return json.dumps(value, separators=(", ", ": "))

        pad = " " * (indent * level)
        child_pad = " " * (indent * (level + 1))

        if isinstance(value, list):
            items = [child_pad + format_value(x, level + 1) for x in value]
            return "[\n" + ",\n".join(items) + "\n" + pad + "]"

        if isinstance(value, dict):
            items = [
                f"{child_pad}{json.dumps(k)}: {format_value(v, level + 1)}"
                for k, v in value.items()
            ]
            return "{\n" + ",\n".join(items) + "\n" + pad + "}"

        return json.dumps(value)

    return format_value(obj, 0)


def dump(obj, fp, indent=2):
    fp.write(dumps(obj, indent))
    fp.write("\n")


load = json.load
loads = json.loads
