import unittest

from funck.pure.term import Abstraction, Application, Variable


class LambdaTermTestCase(unittest.TestCase):

    def test_str(self):
        cases = {
            Variable("x"): "x",
            Abstraction("x", Variable("x")): "% x . x",
            Application(Variable("f"), Variable("a")): "<f + a>",
            Abstraction("x", Application(Variable("f"), Variable("x"))): "% x . <f + x>",
            Application(Abstraction("x", Variable("x")), Abstraction("y", Variable("y"))): "<% x . x + % y . y>",
        }
        for case, expected in cases.items():
            self.assertEqual(expected, str(case), case)

    def test_clone(self):
        cases = [
            Variable("x"),
            Abstraction("x", Application(Variable("x"), Variable("y"))),
            Application(Abstraction("x", Variable("x")), Application(Variable("f"), Variable("g"))),
        ]
        for case in cases:
            clone = case.clone()
            self.assertEqual(case, clone, case)
            self.assertIsNot(case, clone, case)

        term = Application(Variable("f"), Abstraction("x", Variable("x")))
        clone = term.clone()
        self.assertIsNot(term.func, clone.func)
        self.assertIsNot(term.arg.body, clone.arg.body)

    def test_immutable(self):
        term = Abstraction("x", Variable("x"))
        with self.assertRaises(AttributeError):
            term.param = "y"

    def test_alpha_equals(self):
        x, y, z = Variable("x"), Variable("y"), Variable("z")

        should_pass = [
            (x, x),
            (Abstraction("x", x), Abstraction("y", y)),
            (Abstraction("x", Abstraction("y", Application(x, y))), Abstraction("a", Abstraction("b", Application(Variable("a"), Variable("b"))))),
            (Abstraction("x", Application(x, z)), Abstraction("y", Application(y, z))),
            (Abstraction("x", Abstraction("x", x)), Abstraction("a", Abstraction("b", Variable("b")))),
        ]
        for term, other in should_pass:
            self.assertTrue(term.alpha_equals(other), (term, other))
            self.assertTrue(other.alpha_equals(term), (other, term))

        should_fail = [
            (x, y),
            (x, Abstraction("x", x)),
            (Abstraction("x", x), Abstraction("x", y)),
            (Abstraction("x", y), Abstraction("y", y)),
            (Abstraction("x", Abstraction("y", x)), Abstraction("a", Abstraction("a", Variable("a")))),
            (Application(x, y), Application(y, x)),
        ]
        for term, other in should_fail:
            self.assertFalse(term.alpha_equals(other), (term, other))
            self.assertFalse(other.alpha_equals(term), (other, term))

    def test_display(self):
        term = Abstraction("x", Application(Variable("x"), Variable("y")))
        expected = ("Abstraction(param='x', nodes=[\n"
                    "    Application(nodes=[\n"
                    "        Variable(name='x'),\n"
                    "        Variable(name='y')\n"
                    "    ])\n"
                    "])")
        self.assertEqual(expected, term.display())
        self.assertEqual("Variable(name='x')", Variable("x").display())


if __name__ == '__main__':
    unittest.main()
