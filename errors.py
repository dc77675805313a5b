class Snap2Error(Exception):
    """Base class for errors surfaced to the user as a plain message."""

    status_code = 400

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ProviderNotConfiguredError(Snap2Error):
    pass


class GenerationError(Snap2Error):
    status_code = 502


class PerplexityError(GenerationError):
    pass


class InvalidImageError(Snap2Error):
    pass


class ImageGenerationError(Snap2Error):
    status_code = 502
