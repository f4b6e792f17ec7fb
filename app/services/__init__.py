"""Services for checker, presentation, document tracking and AI integration."""

from .checker import CheckerService
from .ai import AIService
from .documents import DocumentStore

__all__ = ["CheckerService", "AIService", "DocumentStore"]
