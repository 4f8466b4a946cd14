from ._config import Config, configure, get_config
from ._depreciation import renamed
from ._errors import EmptyInputError, FunkError, PreconditionError, ShapeError
from ._log import logger
from ._main import CommonBase, Pipeable

__all__ = [
    "CommonBase",
    "Config",
    "EmptyInputError",
    "FunkError",
    "Pipeable",
    "PreconditionError",
    "ShapeError",
    "configure",
    "get_config",
    "logger",
    "renamed",
]
