from typing import Any, Dict, List, Tuple


def _encode_value(value: Any) -> str:
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


def _flatten(prefix: str, value: Any, out: List[Tuple[str, str]]) -> None:
    if value is None:
        return
    if isinstance(value, dict):
        for key, sub_value in value.items():
            _flatten(f'{prefix}[{key}]', sub_value, out)
    elif isinstance(value, (list, tuple)):
        for item in value:
            out.append((f'{prefix}[]', _encode_value(item)))
    else:
        out.append((prefix, _encode_value(value)))


def encode_params(params: Dict[str, Any]) -> List[Tuple[str, str]]:
    # {'vars': {'email': {'exists': True}}} -> [('vars[email][exists]', 'true')]
    out: List[Tuple[str, str]] = []
    for key, value in (params or {}).items():
        _flatten(str(key), value, out)
    return out
