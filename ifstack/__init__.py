from .conditional import (
    ConditionalStack,
    ErrorKind,
    IfStackError,
    ElseWithoutIf,
    ElseAlreadyTaken,
    EndifWithoutIf,
    strerror,
)

__version__ = "1.0.0"
