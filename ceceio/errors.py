

class CeceioError(Exception):
    """ Base class for all ceceio errors"""
    pass


class UnknownSymbol(CeceioError):
    """ Raised when an identifier is not bound in any scope"""

    def __init__(self, identifier):
        super().__init__(f"Unknown symbol: {identifier}")
        self.identifier = identifier


class TypeMismatch(CeceioError):
    """ Raised when a value has the wrong rough type for an operation"""

    def __init__(self, expected: str, received: str):
        super().__init__(f"Type error: Expected {expected}, received {received}")
        self.expected = expected
        self.received = received


class ExactArityMismatch(CeceioError):
    """ Raised when a function needs exactly `expected` arguments"""

    def __init__(self, expected: int, received: int):
        super().__init__(f"Expected {expected} arguments, received {received}")
        self.expected = expected
        self.received = received


class MinimumArityMismatch(CeceioError):
    """ Raised when a function needs at least `at_least` arguments"""

    def __init__(self, at_least: int, received: int):
        super().__init__(f"Expected at least {at_least} arguments, received {received}")
        self.at_least = at_least
        self.received = received


class ParsingError(CeceioError):
    """ Raised when the source text does not match the grammar"""

    def __init__(self, message: str, position: int = 0, line: int = 1, column: int = 1):
        super().__init__(f"Parsing error: {message} (line {line}, column {column})")
        self.message = message
        self.position = position
        self.line = line
        self.column = column


class EmptyCollection(CeceioError):
    """ Raised when popping from an empty scope stack or container"""

    def __init__(self):
        super().__init__("Tried to pop from an empty collection")
