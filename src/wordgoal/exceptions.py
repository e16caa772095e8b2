"""Exception hierarchy for wordgoal."""


class WordgoalError(Exception):
    """Base exception for all wordgoal errors."""

    pass


class StoreError(WordgoalError):
    """Errors related to the preferences store."""

    pass


class StoreLoadError(StoreError):
    """Error reading a preferences file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load preferences '{path}': {reason}")


class StoreWriteError(StoreError):
    """Error writing a preferences file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save preferences '{path}': {reason}")
