from collections.abc import Mapping
from json import dumps as _dumps
from typing import Any


def default(obj: Any) -> Any:
    if isinstance(obj, Mapping):
        return dict(obj)
    raise TypeError('Can not encode this type: {!r}'.format(obj))


def dumps(result: Any, pretty: bool = False) -> bytes:
    if pretty:
        content = _dumps(
            result, default=default, ensure_ascii=False, indent="\t"
        )
    else:
        content = _dumps(
            result, default=default, ensure_ascii=False, separators=(",", ":")
        )
    return content.encode("utf-8")
