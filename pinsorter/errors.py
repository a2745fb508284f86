class PinSorterError(Exception):
    """Base error for the project."""

class DirectoryAccessError(PinSorterError):
    """Staging root unreadable or output directories uncreatable. Aborts the run."""

class ConfigError(PinSorterError):
    pass

class GroupCopyError(PinSorterError):
    pass
