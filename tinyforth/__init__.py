"""
tinyforth - a small Forth interpreter
Modular package implementation

Usage:
    from tinyforth import Forth
    forth = Forth()
    forth.eval(": square dup * ; 3 square")
    forth.current_stack()   # (9,)
"""

from .core import (ForthError, UnknownWord, InvalidWord, UnterminatedDefinition,
                   StackUnderflow, DivisionByZero, tokenize)
from .dictionary import Dictionary, Definition, Primitive
from .repl import Forth, ForthREPL, InteractiveForth

__all__ = [
    'Forth', 'InteractiveForth', 'ForthError', 'UnknownWord', 'InvalidWord',
    'UnterminatedDefinition', 'StackUnderflow', 'DivisionByZero', 'tokenize',
]
__version__ = '0.1.0'
