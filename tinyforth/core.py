"""
tinyforth Core - Base class with fundamental infrastructure
- Exception classes
- Tokenizer and number parsing
- Stack and dictionary ownership
"""

import re

from .dictionary import Dictionary

_TOKEN_RE = re.compile(r'\S+')
_NUMBER_RE = re.compile(r'[+-]?[0-9]+\Z')

DEFINE = ':'
END_DEFINE = ';'


class ForthError(Exception):
    """Base class for every evaluation error"""
    kind = 'ForthError'


class UnknownWord(ForthError):
    kind = 'UnknownWord'

    def __init__(self, word):
        self.word = word
        super().__init__(f"Unknown word: {word}")


class InvalidWord(ForthError):
    kind = 'InvalidWord'

    def __init__(self, word):
        self.word = word
        super().__init__(f"Invalid word name: {word}")


class UnterminatedDefinition(ForthError):
    kind = 'UnterminatedDefinition'

    def __init__(self, name=None):
        self.name = name
        if name is None:
            super().__init__("Definition without a name")
        else:
            super().__init__(f"Definition of {name} is missing ';'")


class StackUnderflow(ForthError):
    kind = 'StackUnderflow'

    def __init__(self, word, needed, available):
        self.word = word
        self.needed = needed
        self.available = available
        super().__init__(
            f"Stack underflow in {word}: needs {needed}, has {available}")


class DivisionByZero(ForthError):
    kind = 'DivisionByZero'

    def __init__(self):
        super().__init__("Division by zero")


class Tokens:
    """Whitespace-delimited tokens of a piece of text.

    Iteration is lazy and every new iteration starts from the first token.
    """

    def __init__(self, text):
        self.text = text

    def __iter__(self):
        for match in _TOKEN_RE.finditer(self.text):
            yield match.group()

    def __repr__(self):
        return f"Tokens({self.text!r})"


def tokenize(text):
    return Tokens(text)


def is_number(token):
    return _NUMBER_RE.match(token) is not None


def parse_number(token):
    """Return the integer value of a numeric token, or None"""
    if is_number(token):
        return int(token)
    return None


class ForthBase:
    """Base mixin providing core infrastructure"""

    def __init__(self):
        self.stack = []
        self.words = Dictionary()

    def _require(self, word, depth):
        """Raise StackUnderflow unless the stack holds at least depth items"""
        if len(self.stack) < depth:
            raise StackUnderflow(word, depth, len(self.stack))

    def _run_body(self, body):
        """Run a flat definition body: push literals, call primitives"""
        for item in body:
            if isinstance(item, int):
                self.stack.append(item)
            else:
                self._require(item.name, item.depth)
                item.func()
