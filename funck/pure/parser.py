"""Recursive descent parser for funck λ-terms.

Formally, funck's grammar can be defined as

```
<λ-term>      ::= <abstraction> | <application> | <variable>
<variable>    ::= (<letter> | "_") (<letter> | <digit> | "_")*    ; ASCII only
<abstraction> ::= "%" <variable> "." <λ-term>                     ; bodies are greedy: %x.<x + y> binds both x's
<application> ::= "<" <λ-term> "+" <λ-term> ">"                   ; always exactly two terms, always bracketed
```

Whitespace (space, tab, CR, LF) is skipped before every token. Every production either succeeds, returning the parsed
term and the position after it, or fails and returns None with the position it was given, so that the caller can try
another production without anything having been consumed. Which production is tried is decided by the next
non-whitespace character alone: '%' is an abstraction, '<' is an application, anything else must be a variable.
"""

import string

from funck.lang.error import ParseFailure
from funck.pure.term import Abstraction, Application, Variable


class Parser:
    """Parses a single string of funck syntax."""
    WHITESPACE = " \t\r\n"
    VAR_START = string.ascii_letters + "_"
    VAR_CHARS = string.ascii_letters + string.digits + "_"

    def __init__(self, text):
        self.text = text

    def skip_whitespace(self, pos):
        while pos < len(self.text) and self.text[pos] in Parser.WHITESPACE:
            pos += 1
        return pos

    def expect(self, char, pos):
        """Returns the position after char if char is the next token, else None."""
        pos = self.skip_whitespace(pos)
        if pos < len(self.text) and self.text[pos] == char:
            return pos + 1
        return None

    def parse_expr(self, pos=0):
        """Dispatches on the next non-whitespace character."""
        pos = self.skip_whitespace(pos)
        if pos == len(self.text):
            return None, pos

        if self.text[pos] == "%":
            return self.parse_abstraction(pos)
        if self.text[pos] == "<":
            return self.parse_application(pos)
        return self.parse_var(pos)

    def parse_var(self, pos):
        start = self.skip_whitespace(pos)
        if start == len(self.text) or self.text[start] not in Parser.VAR_START:
            return None, pos

        end = start
        while end < len(self.text) and self.text[end] in Parser.VAR_CHARS:
            end += 1
        return Variable(self.text[start:end]), end

    def parse_abstraction(self, pos):
        after_bind = self.expect("%", pos)
        if after_bind is None:
            return None, pos

        param, after_param = self.parse_var(after_bind)
        if param is None:
            return None, pos

        after_decl = self.expect(".", after_param)
        if after_decl is None:
            return None, pos

        body, end = self.parse_expr(after_decl)
        if body is None:
            return None, pos

        return Abstraction(param.name, body), end

    def parse_application(self, pos):
        after_open = self.expect("<", pos)
        if after_open is None:
            return None, pos

        func, after_func = self.parse_expr(after_open)
        if func is None:
            return None, pos

        after_plus = self.expect("+", after_func)
        if after_plus is None:
            return None, pos

        arg, after_arg = self.parse_expr(after_plus)
        if arg is None:
            return None, pos

        end = self.expect(">", after_arg)
        if end is None:
            return None, pos

        return Application(func, arg), end


def parse(text, msg="parse error"):
    """Parses text as a single λ-term. Raises ParseFailure (with msg) unless the term spans all of text."""
    term, end = Parser(text).parse_expr()
    if term is None or end != len(text):
        raise ParseFailure(msg, text)
    return term
