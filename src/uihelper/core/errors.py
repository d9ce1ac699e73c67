"""
Exception hierarchy for uihelper.

Helpers do not raise for absent widgets or cancelled dialogs; these
exceptions cover programming errors in the arguments passed to them.
"""


class UIHelperError(Exception):
    """Base class for all uihelper errors."""


class DialogOptionsError(UIHelperError, ValueError):
    """Raised when an option dialog is given no options to show."""

    def __init__(self, message: str = "Option dialog needs at least one option") -> None:
        super().__init__(message)
