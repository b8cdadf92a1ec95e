"""
Exceptions raised by the slide services.
"""


class SlideEngineError(Exception):
    """Base exception for slide row operations."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotFoundError(SlideEngineError):
    """A requested row, slide or track does not exist."""


class RowNotFound(NotFoundError):
    def __init__(self, row_id):
        self.row_id = row_id
        super().__init__(f"Slide row {row_id} not found")


class SlideNotFound(NotFoundError):
    def __init__(self, slide_id, row_id=None):
        self.slide_id = slide_id
        self.row_id = row_id
        if row_id is None:
            super().__init__(f"Slide {slide_id} not found")
        else:
            super().__init__(f"Slide {slide_id} not found in row {row_id}")


class InvalidOrdering(SlideEngineError, ValueError):
    """A reorder request was rejected before anything was written."""


class ReorderFailed(SlideEngineError):
    """The store failed while committing a new ordering; nothing was applied."""
