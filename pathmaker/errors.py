from typing import Optional
from pathmaker.types import ErrorVal


class PathMakerError(Exception):
    """Exception type used to propagate fatal Path_maker errors."""
    def __init__(self, err: ErrorVal):
        super().__init__(f"{err.name}: {err.message}")
        self.err = err

    @property
    def message(self) -> str:
        return self.err.message


class LexError(PathMakerError):
    """Raised by the lexer before any statement executes."""
    UNRECOGNIZED_CHARACTER = 'UnrecognizedCharacter'
    IDENTIFIER_TOO_LONG = 'IdentifierTooLong'

    def __init__(self, kind: str, message: str, line: Optional[int] = None):
        super().__init__(ErrorVal(kind, message))
        self.kind = kind
        self.line = line


class PathSyntaxError(PathMakerError):
    """Raised when the token stream does not match the grammar."""
    MISSING_SEMICOLON = 'MissingSemicolon'
    MISSING_CLOSING_ANGLE = 'MissingClosingAngle'
    UNBALANCED_BRACES = 'UnbalancedBraces'
    UNEXPECTED_END_OF_INPUT = 'UnexpectedEndOfInput'
    MISSING_PATH_AFTER_KEYWORD = 'MissingPathAfterKeyword'
    INVALID_PATH = 'InvalidPath'
    UNEXPECTED_TOKEN = 'UnexpectedToken'
    NESTING_TOO_DEEP = 'NestingTooDeep'

    def __init__(self, kind: str, message: str, line: Optional[int] = None):
        if line is not None:
            message = f"{message} (line {line})"
        super().__init__(ErrorVal(kind, message))
        self.kind = kind
        self.line = line
