"""
Caller-supplied extra field extraction.
"""

from typing import Any, Dict, Mapping, MutableMapping, Optional

from feedextractor.models import ExtraFieldsHook


def apply_hook(
    canonical: MutableMapping[str, Any],
    hook: Optional[ExtraFieldsHook],
    raw_node: Dict[str, Any],
) -> MutableMapping[str, Any]:
    """
    Merges the keys returned by hook(raw_node) into a canonical object.

    Hook keys win over canonical keys of the same name. Whatever the hook
    raises reaches the caller as-is.
    """
    if hook is None:
        return canonical
    extra = hook(raw_node)
    if extra is None:
        return canonical
    if not isinstance(extra, Mapping):
        raise TypeError(
            f"extra field hooks must return a mapping, got {type(extra).__name__}"
        )
    canonical.update(extra)
    return canonical
