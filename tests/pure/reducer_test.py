import unittest

from funck.lang.error import StepLimitExceeded
from funck.pure.parser import parse
from funck.pure.reducer import ApplicativeOrderReducer
from funck.pure.term import Abstraction, Variable


OMEGA = "<%x.<x + x> + %x.<x + x>>"


class ApplicativeOrderReducerTestCase(unittest.TestCase):

    def evaluate(self, expr, namespace=None, **kwargs):
        namespace = {name: parse(term) for name, term in (namespace or {}).items()}
        return ApplicativeOrderReducer(namespace, **kwargs).evaluate(parse(expr))

    def test_evaluate(self):
        cases = {
            "<%x.x + %y.y>": "%y.y",
            "z": "z",
            "%x.<%y.y + x>": "%x.<%y.y + x>",
            "<f + g>": "<f + g>",
            "<f + <%x.x + g>>": "<f + g>",
            "<<f + g> + <%x.x + h>>": "<<f + g> + h>",
            "<<%x.%y.x + a> + b>": "a",
            "<<%x.%y.y + a> + b>": "b",
            "<%x.<x + x> + f>": "<f + f>",
            "<%f.<f + a> + %x.<x + x>>": "<a + a>",
        }
        for case, expected in cases.items():
            self.assertEqual(parse(expected), self.evaluate(case), case)

    def test_namespace(self):
        namespace = {"a": "b", "b": "c", "c": "%x.x"}
        self.assertEqual(parse("%x.x"), self.evaluate("a", namespace))
        self.assertEqual(Variable("y"), self.evaluate("<a + y>", namespace))

        namespace = {"id": "%x.x", "k": "%x.%y.x", "s": "%x.%y.%z.<<x + z> + <y + z>>"}
        self.assertEqual(parse("%x.x"), self.evaluate("<<<s + k> + k> + id>", namespace))
        self.assertEqual(parse("%y.id"), self.evaluate("<k + id>", {"k": "%x.%y.x"}))

    def test_capture_avoidance(self):
        result = self.evaluate("<%x.%y.x + y>")
        self.assertEqual(Abstraction("y1", Variable("y")), result)
        self.assertTrue(result.alpha_equals(parse("%a.y")))

    def test_snapshot(self):
        namespace = {"a": parse("x")}
        reducer = ApplicativeOrderReducer(namespace)
        namespace["a"] = parse("y")
        namespace["b"] = parse("z")

        self.assertEqual(Variable("x"), reducer.evaluate(Variable("a")))
        self.assertEqual(Variable("b"), reducer.evaluate(Variable("b")))

    def test_namespace_unmodified(self):
        namespace = {"twice": parse("%f.%x.<f + <f + x>>")}
        reducer = ApplicativeOrderReducer(namespace)

        for __ in range(3):
            self.assertEqual(parse("%x.<y + <y + x>>"), reducer.evaluate(parse("<twice + y>")))
        self.assertEqual(parse("%f.%x.<f + <f + x>>"), namespace["twice"])

    def test_divergence(self):
        should_raise = [
            (OMEGA, {}),
            ("omega", {"omega": OMEGA}),
            ("<%x.y + omega>", {"omega": OMEGA}),  # argument is reduced even though it is never used
            ("a", {"a": "a"}),
            ("a", {"a": "b", "b": "a"}),
        ]
        for case, namespace in should_raise:
            self.assertRaises(StepLimitExceeded, self.evaluate, case, namespace, max_steps=100)

    def test_max_steps(self):
        self.assertEqual(parse("%y.y"), self.evaluate("<%x.x + %y.y>", max_steps=1))
        self.assertRaises(StepLimitExceeded, self.evaluate, "<%x.x + %y.y>", max_steps=0)

        reducer = ApplicativeOrderReducer(max_steps=2)
        reducer.evaluate(parse("<%x.x + %y.y>"))
        reducer.evaluate(parse("<%x.x + %y.y>"))  # limit applies per evaluation
        self.assertEqual(1, reducer.steps)

    def test_on_step(self):
        steps = []
        namespace = {"id": parse("%x.x")}
        reducer = ApplicativeOrderReducer(namespace, on_step=lambda kind, term: steps.append((kind, str(term))))
        reducer.evaluate(parse("<id + z>"))

        self.assertEqual([("δ", "% x . x"), ("β", "z")], steps)

    def test_type_error(self):
        self.assertRaises(TypeError, ApplicativeOrderReducer().evaluate, "x")


if __name__ == '__main__':
    unittest.main()
