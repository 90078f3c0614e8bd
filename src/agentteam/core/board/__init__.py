from .board import ChatBoard, classify_record
from .schemas import ChatMessage, Contact, Meeting, Specification, TodoItem

__all__ = ["ChatBoard", "ChatMessage", "Contact", "Meeting", "Specification", "TodoItem", "classify_record"]
