from __future__ import annotations

from typing import Any, Dict, List, Optional


# PUBLIC_INTERFACE
def list_envelope(items: List[Any], remaining: int, summary: Optional[str]) -> Dict[str, Any]:
    """
    Build the standard envelope for to-do list responses.

    Args:
        items: The items in display order.
        remaining: Number of items not yet completed.
        summary: Footer text ('<n> items left'), or None for an empty list.

    Returns:
        Dict with keys: items, total, remaining, summary.
    """
    return {
        "items": items,
        "total": len(items),
        "remaining": remaining,
        "summary": summary,
    }
