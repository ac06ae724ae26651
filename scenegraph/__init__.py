"""Scene graph building blocks: linked lists, node hierarchies, a work thread and math types."""

__version__ = "0.1.0"