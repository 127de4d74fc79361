"""
tinyforth Arithmetic - Integer operations
"""

from .core import DivisionByZero


class ForthArithmetic:
    """Mixin providing arithmetic operations"""

    def _register_arithmetic_words(self):
        """Register arithmetic words"""
        self.words.add_primitive('+', 2, self._plus)
        self.words.add_primitive('-', 2, self._minus)
        self.words.add_primitive('*', 2, self._mult)
        self.words.add_primitive('/', 2, self._div)

    def _plus(self):
        b = self.stack.pop()
        a = self.stack.pop()
        self.stack.append(a + b)

    def _minus(self):
        b = self.stack.pop()
        a = self.stack.pop()
        self.stack.append(a - b)

    def _mult(self):
        b = self.stack.pop()
        a = self.stack.pop()
        self.stack.append(a * b)

    def _div(self):
        # divisor is checked in place so a failed division leaves the stack alone
        if self.stack[-1] == 0:
            raise DivisionByZero()
        b = self.stack.pop()
        a = self.stack.pop()
        self.stack.append(truncated_div(a, b))


def truncated_div(a, b):
    """Integer quotient rounded toward zero"""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q
