"""Custom warning categories for flagslice."""


class FlagSliceWarning(UserWarning):
    """Warning category for flagslice-specific warnings.

    This can be used to filter flagslice warnings:
    >>> import warnings
    >>> warnings.filterwarnings("ignore", category=FlagSliceWarning)
    """

    pass


class FlagSliceDeprecationWarning(FlagSliceWarning):
    """Emitted when a flag marked as deprecated appears on the command line."""

    pass
