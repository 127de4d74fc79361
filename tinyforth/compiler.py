"""
tinyforth Compiler - Word definitions (: name ... ;)
"""

import logging

from .core import (DEFINE, END_DEFINE, InvalidWord, UnknownWord,
                   UnterminatedDefinition, parse_number, is_number)

logger = logging.getLogger(__name__)


class ForthCompiler:
    """Mixin providing word compilation and definition"""

    def _define(self, tokens):
        """Compile ': name ... ;' from the remaining tokens.

        Body words are expanded against the dictionary as it is now, so the
        stored body only holds primitives and literals. Nothing is committed
        unless the closing ';' is found.
        """
        name = next(tokens, None)
        if name is None:
            raise UnterminatedDefinition()
        if is_number(name) or name in (DEFINE, END_DEFINE):
            raise InvalidWord(name)

        body = []
        source = []
        for token in tokens:
            if token == END_DEFINE:
                self.words.define(name, body, ' '.join(source))
                logger.debug("defined %s as %s", name.upper(), self.words.get(name).render())
                return
            source.append(token)
            body.extend(self._compile_token(token))

        raise UnterminatedDefinition(name.upper())

    def _compile_token(self, token):
        value = parse_number(token)
        if value is not None:
            return [value]
        definition = self.words.get(token)
        if definition is None:
            raise UnknownWord(token)
        return definition.expand()

    def definitions(self):
        """User definitions in the order they were made.

        Returns a list of (name, source, body) tuples where body is the
        expanded form, e.g. ('SQUARE', 'DUP *', 'DUP *').
        """
        return [(d.name, d.source, d.render()) for d in self.words.user_definitions()]

