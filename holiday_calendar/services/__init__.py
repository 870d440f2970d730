"""Services layer - Holiday queries"""

from .calendar_service import CalendarService

__all__ = ["CalendarService"]
