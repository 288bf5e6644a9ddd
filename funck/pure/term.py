"""Lambda terms in funck syntax.

The `pure` directory contains the untyped lambda calculus itself: the term model, the parser, substitution, and
reduction. Nothing in `pure` performs I/O- see the `lang` directory for statements, sessions, and the shell.

Printed forms mirror the grammar accepted by the parser (see pure/parser.py), so `parse(str(term)) == term` for every
term:

```
Variable("x")                                       x
Abstraction("x", Variable("x"))                     % x . x
Application(Variable("f"), Variable("a"))           <f + a>
```

Terms are immutable: every transformation (substitution, reduction, cloning) builds a new tree instead of rewriting
an existing one, so terms stored in a session's namespace stay valid across any number of evaluations.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class LambdaTerm(ABC):
    """Superclass of the three kinds of λ-term: Variable, Abstraction, and Application."""

    @abstractmethod
    def clone(self):
        """Returns a deep copy of this term."""

    @abstractmethod
    def alpha_equals(self, other, mapping=None, other_mapping=None):
        """Whether or not two LambdaTerms are alpha-equivalent. mapping maps the bound names of self to the bound names
        of other that they correspond to (innermost binder last); other_mapping is the same map from the perspective
        of other.
        """

    @property
    def _cls(self):
        return type(self).__name__

    def display(self, indents=0):
        """Recursively displays the term tree with readable format.

        Format:
        Abstraction(param='<param>', nodes=[
            Application(nodes=[
                ...
                Variable(name='<name>')
            ])
        ])
        """
        result = f"{'    ' * indents}{self._cls}("
        if isinstance(self, Variable):
            return result + f"name='{self.name}')"
        if isinstance(self, Abstraction):
            result += f"param='{self.param}', "

        result += "nodes=["
        for node in self.nodes:
            result += "\n" + node.display(indents + 1) + ","
        return result[:-1] + f"\n{'    ' * indents}])"

    @property
    def nodes(self):
        """Child terms, left to right."""
        return []


@dataclass(frozen=True)
class Variable(LambdaTerm):
    """Variable: an identifier, free or bound by an enclosing Abstraction."""
    name: str

    def clone(self):
        return Variable(self.name)

    def alpha_equals(self, other, mapping=None, other_mapping=None):
        if mapping is None:
            mapping = {}
        if other_mapping is None:
            other_mapping = {}

        if not isinstance(other, Variable):
            return False

        bound = self.name in mapping and mapping[self.name]
        other_bound = other.name in other_mapping and other_mapping[other.name]

        if bound or other_bound:
            # both must be bound, and by binders at the same position
            return bool(bound) and bool(other_bound) and bound[-1] == other.name and other_bound[-1] == self.name
        return self.name == other.name

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class Abstraction(LambdaTerm):
    """Abstraction: binds param within body."""
    param: str
    body: LambdaTerm

    def clone(self):
        return Abstraction(self.param, self.body.clone())

    def alpha_equals(self, other, mapping=None, other_mapping=None):
        if mapping is None:
            mapping = {}
        if other_mapping is None:
            other_mapping = {}

        if not isinstance(other, Abstraction):
            return False

        mapping.setdefault(self.param, []).append(other.param)
        other_mapping.setdefault(other.param, []).append(self.param)
        try:
            return self.body.alpha_equals(other.body, mapping, other_mapping)
        finally:
            mapping[self.param].pop()
            other_mapping[other.param].pop()

    @property
    def nodes(self):
        return [self.body]

    def __str__(self):
        return f"% {self.param} . {self.body}"


@dataclass(frozen=True)
class Application(LambdaTerm):
    """Application of func to arg."""
    func: LambdaTerm
    arg: LambdaTerm

    def clone(self):
        return Application(self.func.clone(), self.arg.clone())

    def alpha_equals(self, other, mapping=None, other_mapping=None):
        if mapping is None:
            mapping = {}
        if other_mapping is None:
            other_mapping = {}

        if not isinstance(other, Application):
            return False
        return (self.func.alpha_equals(other.func, mapping, other_mapping)
                and self.arg.alpha_equals(other.arg, mapping, other_mapping))

    @property
    def nodes(self):
        return [self.func, self.arg]

    def __str__(self):
        return f"<{self.func} + {self.arg}>"
