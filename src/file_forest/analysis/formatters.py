"""Human-readable summaries of query results."""

from __future__ import annotations


def human_size(size_bytes: int) -> str:
    """Convert bytes to human-readable format."""
    size = float(size_bytes)
    for unit in ["B", "KB", "MB", "GB", "TB"]:
        if abs(size) < 1024:
            return f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} PB"


def format_leaves(leaves: list[str], limit: int = 10) -> str:
    """Summarise a leaf listing, truncating long lists."""
    if not leaves:
        return "No leaf files found"
    shown = ", ".join(leaves[:limit])
    if len(leaves) > limit:
        shown += f", ... (+{len(leaves) - limit} more)"
    noun = "file" if len(leaves) == 1 else "files"
    return f"{len(leaves)} leaf {noun}: {shown}"


def format_categories(categories: list[str], counts: dict[str, int]) -> str:
    """Summarise a ranked category list as ``tag (n)`` pairs."""
    if not categories:
        return "No categories found"
    ranked = ", ".join(f"{c} ({counts.get(c, 0)})" for c in categories)
    return f"Top {len(categories)}: {ranked}"


def format_largest(name: str | None, size_bytes: int) -> str:
    """Summarise the heaviest node."""
    if name is None:
        return "No files to aggregate"
    return f"'{name}': {human_size(size_bytes)} including descendants"
