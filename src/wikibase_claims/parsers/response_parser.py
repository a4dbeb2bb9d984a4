import logging
from typing import Optional

from wikibase_claims.exceptions import EditRejected, UnexpectedNodeShape
from wikibase_claims.tree import Node, expect_name, find_child

logger = logging.getLogger(__name__)


def parse_edit_response(api_node: Node) -> Optional[str]:
    """Read the id an edit endpoint reports for what it created or changed.

    Returns the ``id`` of the ``claim`` or ``entity`` child, or None when a
    successful response carries neither. Raises EditRejected with the API's
    error info otherwise.
    """
    expect_name(api_node, "api")

    if api_node.get("success") == "1":
        for name in ("claim", "entity"):
            child = find_child(api_node, name)
            if child is not None:
                if child.get("id") is None:
                    raise UnexpectedNodeShape(f"<{name}> node in edit response has no id attribute")
                return child.get("id")
        return None

    error = find_child(api_node, "error")
    if error is None:
        raise UnexpectedNodeShape("Edit response has neither a success flag nor an error node")
    info = error.get("info") or error.get("code") or "unknown error"
    logger.warning(f"Edit rejected: {info}")
    raise EditRejected(info)
