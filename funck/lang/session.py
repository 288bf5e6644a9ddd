"""Session control for funck. Implementation of statement handling to run the funck interpreter, either in
command-line mode or file interpretation mode.
"""

from funck.lang.error import GenericException
from funck.lang.lexical import BindStmt, ExecStmt, Grammar
from funck.pure.reducer import ApplicativeOrderReducer
from funck.pure.substitution import FreshNames


class Session:
    """Governs a funck session, with control over the named terms in scope."""
    SH_FILE = "<in>"  # command-line interpreter filename

    def __init__(self, error_handler, path=SH_FILE, cmd_line=True, max_steps=None):
        self.error_handler = error_handler
        self.error_handler.register_file(path)

        self.path = path            # used for error messages
        self.cmd_line = cmd_line    # whether or not in command-line mode
        self.max_steps = max_steps  # step limit for each evaluation, None for no limit

        self.namespace = {}            # dict of name: LambdaTerm bound in the current session
        self.fresh_names = FreshNames()
        self.to_exec = {}              # dict of line num: ExecStmts to execute
        self.results = []              # reduced LambdaTerms, in order of execution

        if self.cmd_line:
            self.error_handler.fatal = False

        if path != Session.SH_FILE:
            try:
                with open(path, "r") as file:
                    lines = file.readlines()
            except OSError:
                raise GenericException("'{}' could not be opened", path, diagnosis=False)

            for line_num, line in enumerate(lines):  # each statement sees only the bindings above it
                self.add(line, line_num + 1)
                self.run()

        elif not cmd_line:
            raise GenericException("'<in>' is a reserved filename")

    def add(self, expr, line_num=None):
        """Adds a statement to the current session. Bindings take effect immediately, but reduction is delayed until run
        is called. Blank lines are ignored; in file mode, run is called after every line.
        """
        if line_num is None:
            line_num = max(self.to_exec, default=0) + 1

        expr = Grammar.preprocess(expr)
        if not expr or expr.isspace():
            return None

        self.error_handler.register_line(expr, line_num)  # in case error is raised

        stmt = Grammar.infer(expr)
        if isinstance(stmt, BindStmt):
            if stmt.name in self.namespace:
                self.error_handler.warn("'{}' is already bound; overwriting", stmt.name)
            self.namespace[stmt.name] = stmt.term

        elif isinstance(stmt, ExecStmt):
            self.to_exec[line_num] = stmt

        self.error_handler.remove_line()  # error was not raised
        return stmt

    def run(self):
        """Runs this session's executable statements by reducing them against the current namespace. In file mode, each
        result is also printed. Will raise any errors that are encountered.
        """
        for line_num, exec_stmt in list(self.to_exec.items()):
            self.error_handler.register_line(str(exec_stmt), line_num)

            reducer = ApplicativeOrderReducer(
                self.namespace,
                self.fresh_names,
                max_steps=self.max_steps,
                on_step=self.error_handler.register_step,
                on_rename=self.error_handler.register_rename
            )
            try:
                result = reducer.evaluate(exec_stmt.term)
            finally:
                del self.to_exec[line_num]

            self.results.append(result)
            if not self.cmd_line:
                print(result)  # file mode prints each result as soon as it is reduced

            self.error_handler.remove_line()

    def pop(self):
        """Removes and returns the oldest result."""
        return self.results.pop(0)

    def bindings(self):
        """Returns (name, term) pairs of the namespace, sorted by name."""
        return sorted(self.namespace.items())
