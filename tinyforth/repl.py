"""
tinyforth REPL - Evaluator session and interactive Read-Eval-Print Loop
"""

import logging
import sys

from .core import ForthBase, ForthError, UnknownWord, DEFINE, parse_number, tokenize
from .dictionary import Dictionary
from .arithmetic import ForthArithmetic
from .stack_ops import ForthStack
from .compiler import ForthCompiler

logger = logging.getLogger(__name__)


class Forth(ForthBase, ForthArithmetic, ForthStack, ForthCompiler):
    """Forth session owning one stack and one dictionary"""

    def __init__(self):
        super().__init__()
        self._register_all_words()

    def _register_all_words(self):
        """Register all words from all mixins"""
        self._register_arithmetic_words()
        self._register_stack_words()

    def eval(self, text):
        """Evaluate text against the session's stack and dictionary.

        Raises a ForthError subclass at the first failing token. Effects of
        the tokens before it are kept.
        """
        tokens = iter(tokenize(text))
        try:
            for token in tokens:
                self._execute_token(token, tokens)
        except ForthError as e:
            logger.debug("eval failed (%s): %s", e.kind, e)
            raise

    def _execute_token(self, token, tokens):
        if token == DEFINE:
            self._define(tokens)
            return

        value = parse_number(token)
        if value is not None:
            self.stack.append(value)
            return

        definition = self.words.get(token)
        if definition is None:
            raise UnknownWord(token)
        self._run_body(definition.body)

    def current_stack(self):
        """Read-only snapshot of the stack, bottom first"""
        return tuple(self.stack)

    def reset(self):
        """Start a new session: empty stack, built-ins only"""
        self.stack = []
        self.words = Dictionary()
        self._register_all_words()
        logger.debug("session reset")
        return self


class ForthREPL:
    """Mixin providing the interactive loop"""

    def _readline_input(self, prompt):
        sys.stdout.write(prompt)
        sys.stdout.flush()
        line = sys.stdin.readline()
        if not line:
            raise EOFError()
        return line.rstrip('\n')

    def handle_line(self, line):
        """Evaluate one line of input and return the text to show.

        Returns None when the session should end.
        """
        command = line.strip().lower()

        if command == 'bye':
            return None
        if command in ('stack', '.s'):
            return self.format_stack()
        if command == 'words':
            return '\n'.join(
                ' '.join(filter(None, (':', name, source, ';')))
                for name, source, _ in self.definitions()
            )
        if command == 'abort':
            self.stack.clear()
            return "Stack cleared"
        if command == 'reset':
            self.reset()
            return "Session reset"

        try:
            self.eval(line)
        except ForthError as e:
            return f"Error: {e}"
        if self.show_stack:
            return f"{self.format_stack()} ok"
        return "ok"

    def repl(self, readline_mode=False, show_stack=True):
        """Start interactive REPL

        Args:
            readline_mode: If True, use sys.stdin.readline instead of input().
            show_stack: If True, print the stack after every evaluated line.
        """
        self.show_stack = show_stack
        get_input = self._readline_input if readline_mode else input

        print("tinyforth - type 'bye' to quit, 'words' to list definitions")

        while True:
            try:
                line = get_input("OK> ")
            except EOFError:
                break
            except KeyboardInterrupt:
                print("\n(Ctrl+C) Type 'bye' to quit")
                continue

            output = self.handle_line(line)
            if output is None:
                print("Bye!")
                break
            if output:
                print(output)

        return self


class InteractiveForth(Forth, ForthREPL):
    """Forth session with REPL and a small Python API"""

    def __init__(self):
        super().__init__()
        self.show_stack = True

    def __call__(self, text):
        self.eval(text)
        return self

    def push(self, *values):
        for v in values:
            self.stack.append(int(v))
        return self

    def pop(self):
        return self.stack.pop() if self.stack else None

    def peek(self):
        return self.stack[-1] if self.stack else None
