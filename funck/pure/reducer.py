"""Applicative-order reduction of λ-terms to weak normal form.

Reduction rules, given a namespace of named terms:
    - Variable: if the name is bound in the namespace, the bound term is reduced in its place ("δ" step). Otherwise the
      Variable is free and is returned as is.
    - Abstraction: already a value. Its body is never entered.
    - Application: the function and then the argument are both reduced. If the function reduced to an Abstraction,
      the argument is substituted for its parameter and the result reduced ("β" step); otherwise the Application is
      stuck and is returned rebuilt from the two reduced halves.

Arguments are always reduced before substitution, even ones the function ignores, so `<% x . y + omega>` diverges.
A term that has no weak normal form under these rules makes evaluate loop forever unless max_steps is given.
"""

from funck.lang.error import StepLimitExceeded
from funck.pure.substitution import FreshNames, Substituter
from funck.pure.term import Abstraction, Application, Variable


class ApplicativeOrderReducer:
    """Reduces terms against a snapshot of namespace (name: LambdaTerm)."""
    BETA = "β"
    DELTA = "δ"

    def __init__(self, namespace=None, fresh_names=None, max_steps=None, on_step=None, on_rename=None):
        """max_steps, if given, bounds the number of β and δ steps a single call to evaluate may take. on_step is
        called as on_step(kind, term) after every step, where kind is BETA or DELTA.
        """
        self.namespace = dict(namespace) if namespace else {}  # later bindings must not affect this reduction
        self.substituter = Substituter(fresh_names if fresh_names is not None else FreshNames(), on_rename)

        self.max_steps = max_steps
        self.on_step = on_step
        self.steps = 0

    def evaluate(self, term):
        """Returns the weak normal form of term. term itself is left untouched."""
        self.steps = 0
        return self._evaluate(term)

    def _evaluate(self, term):
        while True:
            if isinstance(term, Variable):
                if term.name not in self.namespace:
                    return term.clone()
                term = self.namespace[term.name]
                self._step(ApplicativeOrderReducer.DELTA, term)

            elif isinstance(term, Abstraction):
                return term.clone()

            elif isinstance(term, Application):
                func = self._evaluate(term.func)
                arg = self._evaluate(term.arg)

                if not isinstance(func, Abstraction):
                    return Application(func, arg)

                term = self.substituter.substitute(func.body, func.param, arg)
                self._step(ApplicativeOrderReducer.BETA, term)

            else:
                raise TypeError(f"expected LambdaTerm, got '{type(term).__name__}'")

    def _step(self, kind, term):
        self.steps += 1
        if self.on_step is not None:
            self.on_step(kind, term)

        if self.max_steps is not None and self.steps > self.max_steps:
            raise StepLimitExceeded(f"evaluation exceeded {self.max_steps} reduction steps")
