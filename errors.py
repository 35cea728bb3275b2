"""Exceptions raised while searching for bright regions."""


class BrightGroupsError(Exception):
    """Base class for every fatal error of a run."""


class ImageLoadError(BrightGroupsError):
    """The target image is missing, unreadable or cannot be decoded."""


class TooManyCandidatesError(BrightGroupsError):
    """More bright pixels than the guard allows and no override given."""

    def __init__(self, count: int, limit: int):
        self.count = count
        self.limit = limit
        super().__init__(
            f"Got too much bright pixels ({count} > {limit}). "
            "Use -f to force calculation or raise the threshold."
        )


class RegionUnderflowError(BrightGroupsError):
    """A region window reaches past coordinate zero under the strict policy."""


class SettingsError(BrightGroupsError):
    """Invalid settings file or out-of-range setting value."""
