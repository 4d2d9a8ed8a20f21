import json
from enum import Enum


class JSONEncoder(json.JSONEncoder):
    """Custom JSON encoder for attribute requests, enums and sets"""
    def default(self, obj):
        to_json = getattr(obj, "to_json_value", None)
        if callable(to_json):
            return to_json()
        if isinstance(obj, Enum):
            return obj.value
        if isinstance(obj, (set, frozenset)):
            return sorted(obj)
        try:
            iterable = iter(obj)
        except TypeError:
            pass
        else:
            return list(iterable)
        return super().default(obj)


def dumps(obj) -> str:
    """Deterministic JSON rendering used for projections."""
    return json.dumps(obj, cls=JSONEncoder, sort_keys=True, separators=(",", ":"))
