class BoostMeError(Exception):
    """Base class for all application errors."""
    pass


class StoreError(BoostMeError):
    """Raised when the device-local store cannot be read or written."""
    pass


class ValidationError(BoostMeError):
    """Raised when user input fails a local check before any request is sent."""
    pass


class CoachError(BoostMeError):
    """Raised by coaching transports on network, status or parse failures."""
    pass


class ChatBusyError(BoostMeError):
    """Raised when a chat message is sent while a reply is still streaming."""
    pass
