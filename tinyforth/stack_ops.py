"""
tinyforth Stack Operations - Stack manipulation words
"""


class ForthStack:
    """Mixin providing stack manipulation operations"""

    def _register_stack_words(self):
        """Register stack words"""
        self.words.add_primitive('dup', 1, self._dup)
        self.words.add_primitive('drop', 1, self._drop)
        self.words.add_primitive('swap', 2, self._swap)
        self.words.add_primitive('over', 2, self._over)

    def _dup(self):
        self.stack.append(self.stack[-1])

    def _drop(self):
        self.stack.pop()

    def _swap(self):
        a, b = self.stack.pop(), self.stack.pop()
        self.stack.extend([a, b])

    def _over(self):
        self.stack.append(self.stack[-2])

    def format_stack(self):
        """Display form of the stack, e.g. '<3> 1 2 3'"""
        items = ' '.join(str(item) for item in self.stack)
        return f"<{len(self.stack)}> {items}".rstrip()
