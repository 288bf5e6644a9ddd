"""Handles interactive/command-line mode for funck interpreter. Uses cmd as backend."""

import cmd

from termcolor import colored

from funck.lang.lexical import BindStmt
from funck.pure.parser import parse


class Shell(cmd.Cmd):
    """funck interpreter shell."""
    intro = "[funck] Ready.\nType ':help' for more information."
    prompt = "> "
    command_prefix = ":"

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.sess = sess
        self.line_num = 0

    def parseline(self, line):
        """Only ':'-prefixed lines and end of input are commands, so a statement such as 'exit' or 'help = %x.x' goes
        to default, unstripped.
        """
        if line == "EOF" or not line.strip():
            return super().parseline(line)

        stripped = line.lstrip()
        if stripped.startswith(Shell.command_prefix):
            command, arg, command_line = super().parseline(stripped[len(Shell.command_prefix):])
            if command and hasattr(self, "do_" + command):
                return command, arg, command_line

        return None, None, line

    def default(self, line):
        """Executes arbitrary funck statement."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            self.line_num += 1
            stmt = self.sess.add(line, self.line_num)

            if isinstance(stmt, BindStmt):
                print(colored("[funck] Bound: ", attrs=["dark"]) + stmt.name)
                return

            self.sess.run()
            while self.sess.results:
                print(f"| {self.sess.pop()} |")

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        print("Welcome to the funck interpreter!\n\n"
              "funck evaluates untyped lambda calculus written as '%x.body' (abstraction) and \n"
              "'<f + a>' (application). Arguments are evaluated before they are applied.\n\n"
              "Try it out by typing 'id = %x.x'. This will bind the lambda term '%x.x' to the \n"
              "name 'id'. Next, try typing '<id + y>'. This will apply 'id' to 'y', giving 'y' \n"
              "as the result.\n\n"
              "Commands: ':bindings' lists bound names, ':tree TERM' shows how TERM is parsed, \n"
              "':exit' quits. Press Ctrl-C to interrupt an evaluation that doesn't finish.")

    def do_bindings(self, arg):
        """Lists every bound name and its (unreduced) term."""
        for name, term in self.sess.bindings():
            print(f"{colored(name, attrs=['bold'])} = {term}")

    def do_tree(self, arg):
        """Displays the syntax tree of a λ-term without reducing it."""
        with self.sess.error_handler:
            print(parse(arg).display())

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return ""

    def do_EOF(self, arg):
        """Exits interpreter."""
        print()
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True
