from .base import RecordKind, ToolHandler, ToolOutcome
from .registry import ToolRegistry, build_default_registry

__all__ = ["RecordKind", "ToolHandler", "ToolOutcome", "ToolRegistry", "build_default_registry"]
