"""Capture-avoiding substitution.

Substituting N for x in M (written M[x := N]) replaces every free occurrence of x in M with N. Done naively, a free
variable of N can end up under an Abstraction of M that binds the same name:

```
(% y . x)[x := y]  =  % y . y      ; wrong: the free y is now bound
(% y . x)[x := y]  =  % y1 . y     ; right: rename the binder first
```

Binders are renamed with names from a FreshNames generator, which appends a per-name counter to the original name
(y -> y1 -> y2 ...). FreshNames does not check for collisions with names a user typed themselves, so a term that
already uses y1 freely can still be captured by a renamed y1 binder.

Source: http://pages.cs.wisc.edu/~horwitz/CS704-NOTES/1.LAMBDA-CALCULUS.html#NOR
"""

from collections import defaultdict

from funck.pure.term import Abstraction, Application, Variable


class FreshNames:
    """Generates names that are unique (per base name) for the lifetime of this object."""

    def __init__(self):
        self.counter = defaultdict(int)

    def fresh(self, base):
        self.counter[base] += 1
        return f"{base}{self.counter[base]}"


def free_variables(term, bound=frozenset()):
    """Returns the set of names occurring in term that are not bound by an enclosing Abstraction (or in bound)."""
    if isinstance(term, Variable):
        return set() if term.name in bound else {term.name}
    if isinstance(term, Abstraction):
        return free_variables(term.body, bound | {term.param})
    if isinstance(term, Application):
        return free_variables(term.func, bound) | free_variables(term.arg, bound)
    raise TypeError(f"expected LambdaTerm, got '{type(term).__name__}'")


class Substituter:
    """Performs capture-avoiding substitution, renaming binders with names from fresh_names."""

    def __init__(self, fresh_names=None, on_rename=None):
        self.fresh_names = fresh_names if fresh_names is not None else FreshNames()
        self.on_rename = on_rename  # called as on_rename(old, new) on every alpha-conversion

    def substitute(self, term, var, new_term):
        """Returns term[var := new_term]. Neither term nor new_term is modified: the result is a new tree, with every
        substituted occurrence a separate copy of new_term.
        """
        if isinstance(term, Variable):
            return new_term.clone() if term.name == var else term.clone()

        if isinstance(term, Abstraction):
            if term.param == var:
                return term.clone()  # var is shadowed, nothing to substitute

            if term.param in free_variables(new_term):
                renamed = self.alpha_convert(term)
                return self.substitute(renamed, var, new_term)

            return Abstraction(term.param, self.substitute(term.body, var, new_term))

        if isinstance(term, Application):
            return Application(self.substitute(term.func, var, new_term), self.substitute(term.arg, var, new_term))

        raise TypeError(f"expected LambdaTerm, got '{type(term).__name__}'")

    def alpha_convert(self, abstraction):
        """Returns abstraction with its binder renamed to a fresh name. Only the outermost binder is renamed: nested
        conflicts are found (and renamed) when substitution continues into the body.
        """
        new_param = self.fresh_names.fresh(abstraction.param)
        if self.on_rename is not None:
            self.on_rename(abstraction.param, new_param)

        body = self.substitute(abstraction.body, abstraction.param, Variable(new_param))
        return Abstraction(new_param, body)
