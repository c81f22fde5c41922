from attrs import field, frozen, validators

from patternlang.exceptions.core import ErrorLevel

DEFAULT_MAX_DEPTH = 256


@frozen
class ValidatorConfig:
    """Settings for a validation run.

    Notes:
      - `max_depth` bounds the number of nested container levels walked. It stays well
        below the interpreter's recursion limit so deep trees fail with a diagnostic
        instead of a RecursionError.
      - `error_level` only affects messages of exceptions raised by `Validator.check`.
    """

    max_depth: int = field(default=DEFAULT_MAX_DEPTH, validator=validators.ge(1))
    error_level: ErrorLevel = ErrorLevel.USER
