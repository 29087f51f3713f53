"""Exception hierarchy shared by the helper modules."""


class BakeHelperError(Exception):
    """Base exception for all bake_helper errors."""

    pass
