"""dia exceptions."""


class DiaError(Exception):
    """Base exception for dia."""


class ConfigDirError(DiaError):
    """The platform user config directory could not be resolved."""


class DialogError(DiaError):
    """A native dialog failed to present or respond."""


class RecentFilesError(DiaError):
    """Recent-files list could not be read or written."""


class RecentFilesDecodeError(RecentFilesError):
    """Persisted recent-files list is not a JSON array of strings."""


class UnknownEventError(DiaError):
    """Event name is not one the frontend understands."""
