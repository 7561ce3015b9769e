"""klaw-option: Type-safe Option type for Python 3.13+.

Flat imports (preferred):
    from klaw_option import Option, Some, Nothing
    from klaw_option import from_, from_nullable, empty, some, none

Submodule imports (for organization):
    from klaw_option.option import Option, Some, NothingType
    from klaw_option.factories import from_nullable
    from klaw_option.errors import EmptyValueError
"""

# Configuration and logging
from klaw_option._config import LogFormat, OptionConfig, get_config, init
from klaw_option._logging import configure_logging, get_logger

# Errors
from klaw_option.errors import EmptyValueError, InvariantViolation, OptionError

# Factories
from klaw_option.factories import empty, from_, from_nullable, none, some

# Types
from klaw_option.option import (
    Nothing,
    NothingType,
    Option,
    Some,
    is_none,
    is_some,
)

__all__ = [
    # Errors
    'EmptyValueError',
    'InvariantViolation',
    # Configuration
    'LogFormat',
    # Option types
    'Nothing',
    'NothingType',
    'Option',
    'OptionConfig',
    'OptionError',
    'Some',
    # Logging
    'configure_logging',
    # Factories
    'empty',
    'from_',
    'from_nullable',
    'get_config',
    'get_logger',
    'init',
    # Guards
    'is_none',
    'is_some',
    'none',
    'some',
]
