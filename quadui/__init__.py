"""Immediate-mode UI building blocks: layout, input, text editing, draw commands, meshes and styles."""

__version__ = "0.1.0"

__all__ = [
    "commands",
    "cursor",
    "editbox",
    "geometry",
    "input",
    "key_repeat",
    "mesh",
    "style",
    "text_editor",
]