"""Async tool wrappers returning structured results."""
