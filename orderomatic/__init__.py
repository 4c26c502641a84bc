"""Order-O-Matic: drag-and-drop ordering for nested dashboard widgets."""

__version__ = "0.1.0"
