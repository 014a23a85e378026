class GameDataError(Exception):
    """Base for failures loading a week file."""

    def __init__(self, key: str, message: str = ""):
        self.key = key
        super().__init__(message or key)


class PartitionNotFound(GameDataError):
    # Routine: the season view uses it to find the last week.
    pass


class PartitionReadError(GameDataError):
    pass


class PartitionParseError(GameDataError):
    pass
