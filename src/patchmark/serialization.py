"""Serialization of compiled nodes to/from JSON-compatible dicts.

Useful for handing compiled output to an editor running in another
process, or for caching a compiled document. Reference bookkeeping
(``data-reference``) survives the round trip, so deserialized nodes can
still be patched by fix_references.

All JSON output is deterministic (sorted keys).

Example:
    from patchmark import compile_paragraph
    from patchmark.serialization import to_json, from_json

    node = compile_paragraph("# Hello **World**", {})
    assert from_json(to_json(node)) == node

"""

import json
from typing import Any

from patchmark.nodes import CompiledNode, Reference, ReferenceData

_NODE_TYPE = "CompiledNode"
_REFERENCE_TYPE = "Reference"


def to_dict(node: CompiledNode | Reference) -> dict[str, Any]:
    """Convert a node (or reference record) to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization. Text
    children stay plain strings.

    """
    if isinstance(node, Reference):
        return {
            "_type": _REFERENCE_TYPE,
            "name": node.name,
            "link": node.data.link,
            "title": node.data.title,
        }
    return {
        "_type": _NODE_TYPE,
        "tag": node.tag,
        "attrs": dict(node.attrs),
        "children": [
            child if isinstance(child, str) else to_dict(child) for child in node.children
        ],
    }


def from_dict(data: dict[str, Any]) -> CompiledNode | Reference:
    """Reconstruct a node (or reference record) from a dict.

    Raises:
        ValueError: If ``_type`` is missing or unknown.

    """
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized node"
        raise ValueError(msg)

    if type_name == _REFERENCE_TYPE:
        return Reference(
            name=data["name"],
            data=ReferenceData(link=data.get("link", ""), title=data.get("title", "")),
        )
    if type_name != _NODE_TYPE:
        msg = f"Unknown node type: {type_name!r}"
        raise ValueError(msg)

    children: list[CompiledNode | str] = []
    for child in data.get("children", []):
        if isinstance(child, str):
            children.append(child)
        else:
            restored = from_dict(child)
            if not isinstance(restored, CompiledNode):
                msg = f"Expected CompiledNode child, got {type(restored).__name__}"
                raise ValueError(msg)
            children.append(restored)

    return CompiledNode(tag=data["tag"], attrs=dict(data.get("attrs", {})), children=children)


def to_json(nodes: CompiledNode | list[CompiledNode], *, indent: int | None = None) -> str:
    """Serialize a node, or a list of nodes, to a JSON string."""
    if isinstance(nodes, CompiledNode):
        payload: Any = to_dict(nodes)
    else:
        payload = [to_dict(node) for node in nodes]
    return json.dumps(payload, sort_keys=True, indent=indent)


def from_json(data: str) -> CompiledNode | list[CompiledNode]:
    """Deserialize what to_json produced.

    Raises:
        ValueError: If the JSON does not hold compiled nodes.

    """
    raw = json.loads(data)
    if isinstance(raw, list):
        nodes = [from_dict(item) for item in raw]
        for node in nodes:
            if not isinstance(node, CompiledNode):
                msg = f"Expected CompiledNode, got {type(node).__name__}"
                raise ValueError(msg)
        return nodes  # type: ignore[return-value]

    node = from_dict(raw)
    if not isinstance(node, CompiledNode):
        msg = f"Expected CompiledNode, got {type(node).__name__}"
        raise ValueError(msg)
    return node


__all__ = ["from_dict", "from_json", "to_dict", "to_json"]
