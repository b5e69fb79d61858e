from .state import EditorState

__all__ = ["EditorState"]
