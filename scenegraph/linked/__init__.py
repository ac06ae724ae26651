"""Linked data structures: forward lists and node hierarchies."""