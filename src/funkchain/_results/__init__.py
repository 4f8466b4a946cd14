from ._option import NONE, Option, OptionUnwrapError, Some

__all__ = ["NONE", "Option", "OptionUnwrapError", "Some"]
