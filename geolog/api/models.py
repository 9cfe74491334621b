"""Pydantic request/response models for the templates API."""

from pydantic import BaseModel, Field

from geolog.core import Cache, LogContext, LogEntry, Trackable


class LogTemplateResponse(BaseModel):
    """A log template as offered to the UI."""

    token: str
    label: str | None = None  # None for internal templates
    item_id: int
    description: str = ""


class CacheModel(BaseModel):
    """Cache data for rendering."""

    geocode: str
    name: str = ""
    owner_display_name: str = ""
    url: str | None = None


class TrackableModel(BaseModel):
    """Trackable data for rendering."""

    geocode: str
    name: str = ""
    owner: str = ""
    url: str | None = None


class RenderRequest(BaseModel):
    """Text to render plus the context it is rendered for."""

    text: str = Field(..., max_length=20000)
    cache: CacheModel | None = None
    trackable: TrackableModel | None = None
    log_entry: str | None = None  # text of the log being edited
    offline: bool = False
    increment: bool = True  # False re-renders without advancing [NUMBER]

    def to_context(self) -> LogContext:
        return LogContext(
            cache=Cache(**self.cache.model_dump()) if self.cache else None,
            trackable=Trackable(**self.trackable.model_dump()) if self.trackable else None,
            log_entry=LogEntry(text=self.log_entry) if self.log_entry is not None else None,
            offline=self.offline,
        )


class RenderResponse(BaseModel):
    """Rendered text."""

    text: str
