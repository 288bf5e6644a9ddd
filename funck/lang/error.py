"""Error handling for funck. Only GenericExceptions should be encountered during running: if another type of error is
raised and makes it all the way to ErrorHandler, it is assumed to be an internal issue.

Two kinds of error are part of the language:
    - ParseFailure: a statement is not valid funck syntax. Deliberately carries no position or reason.
    - StepLimitExceeded: an evaluation ran past the step limit given with --max-steps. Without a limit, a term with no
      normal form simply never finishes reducing (interrupt it with Ctrl-C in the shell).
"""

import sys

from termcolor import colored


class GenericException(Exception):
    """A funck error or warning. msg is formatted with expr (bolded); start and end mark the offending part of expr."""

    def __init__(self, msg, expr="", start=0, end=None, diagnosis=True, internal=False):
        self.msg = msg.format(colored(expr, attrs=["bold"]))
        self.expr = expr
        self.start = start
        self.end = len(expr) if end is None else end

        self.diagnosis = diagnosis
        self.internal = internal

        super().__init__(self.msg)


class ParseFailure(GenericException):
    """Raised when a statement isn't valid funck syntax."""

    def __init__(self, msg, expr=""):
        super().__init__(msg, expr, diagnosis=False)


class StepLimitExceeded(GenericException):
    """Raised when an evaluation takes more reduction steps than allowed."""

    def __init__(self, msg):
        super().__init__(msg, diagnosis=False)


class ErrorHandler:
    """Context manager that reports funck errors/warnings instead of letting them propagate."""
    ERROR = "red"
    WARNING = "magenta"
    STEP = "cyan"

    def __init__(self, fatal=True, trace=False):
        self.fatal = fatal
        self.trace = trace  # whether or not to print reduction steps

        self.path = None
        self.line = None
        self.line_num = None

    def register_file(self, path):
        self.path = path
        self.remove_line()

    def register_line(self, line, line_num):
        """Registers the line currently being handled. Should be called prior to Session add/run."""
        self.line = line
        self.line_num = line_num

    def remove_line(self):
        """Should be called after a line was handled without error."""
        self.line = None
        self.line_num = None

    def register_step(self, kind, expr):
        """Prints a reduction step (β: beta-reduction, δ: named term lookup, α: alpha-conversion) if tracing."""
        if self.trace:
            print(colored(f"  {kind} ", ErrorHandler.STEP, attrs=["bold"]) + str(expr))

    def register_rename(self, old, new):
        self.register_step("α", f"{old} -> {new}")

    @staticmethod
    def diagnose(error, warning=False):
        """Returns error.expr with a caret line underlining the offending part."""
        color = ErrorHandler.WARNING if warning else ErrorHandler.ERROR
        width = max(error.end - error.start, 1)

        marker = " " * error.start + colored("^" + "~" * (width - 1), color, attrs=["bold"])
        return f"  {error.expr}\n  {marker}"

    def report(self, error, label, color):
        """Prints error as '<file>:<line>: <label>: <msg>', plus a diagnosis if error has one."""
        location = ""
        if self.line is not None:
            location = colored(f"{self.path}:{self.line_num}: ", attrs=["bold"])
        if error.internal:
            location += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])

        print(location + colored(f"{label}: ", color, attrs=["bold"]) + error.msg)
        if not error.internal and error.expr and error.diagnosis:
            print(ErrorHandler.diagnose(error, warning=label == "warning"))

    def warn(self, *args, **kwargs):
        self.report(GenericException(*args, **kwargs), "warning", ErrorHandler.WARNING)

    def throw(self, error):
        """Reports error (a GenericException), then exits if fatal."""
        self.report(error, "error", ErrorHandler.ERROR)

        if self.fatal:
            sys.exit(1)
        self.remove_line()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(GenericException("keyboard interrupt"))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is RecursionError:
            self.throw(GenericException("maximum recursion depth exceeded (term is too deeply nested)"))
        elif exc_type is not None and issubclass(exc_type, GenericException):
            self.throw(exc_val)
        elif exc_type is not None:
            self.throw(GenericException("unknown error: '{}'", f"{exc_type.__name__}: {exc_val}", internal=True))
            do_exit = True

        return not do_exit
