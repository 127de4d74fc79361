"""
tinyforth Dictionary - word table shared by built-ins and user definitions
"""


class Primitive:
    """A built-in operation that can be spliced into definition bodies"""

    def __init__(self, name, depth, func):
        self.name = name
        self.depth = depth
        self.func = func

    def __repr__(self):
        return f"<primitive {self.name}>"


class Definition:
    """A named, flat sequence of primitives and integer literals"""

    def __init__(self, name, body, source=None):
        self.name = name
        self.body = tuple(body)
        self.source = source

    def expand(self):
        return list(self.body)

    def render(self):
        """Display form of the body, e.g. 'DUP *'"""
        return ' '.join(
            str(item) if isinstance(item, int) else item.name
            for item in self.body
        )

    def __repr__(self):
        return f"<definition {self.name}: {self.render()}>"


class Dictionary:
    """Case-insensitive mapping from word name to Definition"""

    def __init__(self):
        self._entries = {}
        self._definition_order = []

    @staticmethod
    def _key(name):
        return name.lower()

    def __contains__(self, name):
        return self._key(name) in self._entries

    def get(self, name):
        return self._entries.get(self._key(name))

    def add_primitive(self, name, depth, func):
        primitive = Primitive(name.upper(), depth, func)
        self._entries[self._key(name)] = Definition(primitive.name, [primitive])
        return primitive

    def define(self, name, body, source):
        """Insert or overwrite a user word. Other entries are never touched."""
        key = self._key(name)
        self._entries[key] = Definition(name.upper(), body, source)
        if key in self._definition_order:
            self._definition_order.remove(key)
        self._definition_order.append(key)

    def user_definitions(self):
        """User definitions, oldest first"""
        return [self._entries[key] for key in self._definition_order]
