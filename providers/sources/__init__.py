"""Auto-import all providers to trigger @register decorators."""

from providers.sources import eventbrite  # noqa: F401
