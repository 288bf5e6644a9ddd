"""Lexical analysis for funck statements. Note that this module does not provide input file parsing, but rather
tokenization of single lines.

All grammar can be loosely defined as follows:

```
<bind_stmt> ::= <name> "=" <λ-term>    ; binds <λ-term>, unreduced, to <name>; reduced only when used later on
<exec_stmt> ::= <λ-term>               ; reduced and outputted when the session is run
```

Any line containing "=" is a binding: <name> is everything before the first "=". λ-term grammar is in pure/parser.py.
"""

from abc import abstractmethod, ABC

from funck.lang.error import GenericException
from funck.pure.parser import parse


class Grammar(ABC):
    """Superclass representing any statement in funck."""

    def __init__(self, expr):
        """Assumes check_grammar has been run."""
        self.expr = Grammar.preprocess(expr)
        self._cls = type(self).__name__

    @staticmethod
    @abstractmethod
    def check_grammar(expr):
        """This method should check expr's top-level grammar and return whether or not it is this kind of statement."""

    @staticmethod
    def preprocess(expr):
        """Removes the line terminator. Any other whitespace is left to the parser: trailing whitespace is unconsumed
        input, and so a parse error.
        """
        return expr.rstrip("\r\n")

    @classmethod
    def infer(cls, expr):
        """Infers the type of statement expr is and returns an object of the correct grammar subclass. Raises a
        ParseFailure if the statement's λ-term can't be parsed.
        """
        for subclass in cls.__subclasses__():
            if subclass.check_grammar(expr):
                return subclass(expr)

        raise GenericException("'{}' is not valid funck grammar", expr)

    def __repr__(self):
        return f"{self._cls}('{self.expr}')"

    def __str__(self):
        return self.expr

    def __eq__(self, other):
        return isinstance(other, type(self)) and other.expr == self.expr

    def __hash__(self):
        return hash(self.expr)


class BindStmt(Grammar):
    """Binding statement in funck. See docstrings for grammar."""

    def __init__(self, expr):
        super().__init__(expr)

        name, body = self.expr.split("=", 1)
        self.name = name.strip()
        if not self.name:
            raise GenericException("'{}' binds nothing: expected NAME = λ-TERM", self.expr, end=self.expr.index("=") + 1)

        self.term = parse(body, "parse error in binding")

    @staticmethod
    def check_grammar(expr):
        return "=" in expr


class ExecStmt(Grammar):
    """Executable (evaluation) statement in funck. See docstrings for grammar."""

    def __init__(self, expr):
        super().__init__(expr)
        self.term = parse(self.expr)

    @staticmethod
    def check_grammar(expr):
        return "=" not in expr
