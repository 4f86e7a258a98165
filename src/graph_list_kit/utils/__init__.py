"""Utility modules for graph-list-kit."""

from graph_list_kit.utils.json_scan import JsonMember, find_member, scan_object

__all__ = [
    "JsonMember",
    "scan_object",
    "find_member",
]
