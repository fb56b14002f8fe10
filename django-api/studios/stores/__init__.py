from studios.stores.interfaces import CalendarStore, ContentStore
from studios.stores.memory_store import InMemoryCalendarStore, InMemoryContentStore

__all__ = [
    "CalendarStore",
    "ContentStore",
    "InMemoryCalendarStore",
    "InMemoryContentStore",
]
