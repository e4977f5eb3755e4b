from os import isatty
from sys import stdin, stdout, stderr, exit
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import logging

from prompt_toolkit import PromptSession

from .util import RPNError, format_result
from .machine import Machine
from .lexer import Lexer
from .dispatcher import Dispatcher, QUIT
from .text import BANNER, HELP, BATCH, RULE, THIN_RULE


logger = logging.getLogger(__name__)


class InteractiveInput:
    def __init__(self, prompt):
        self.prompt = prompt

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    vi_mode=True,
                                    enable_suspend=True,
                                    enable_open_in_editor=True,
                                    # Not persistent, on purpose.
                                    history=None,
                                    prompt_continuation=' ' * len(self.prompt),
                                    # Certainly not! But be explicit.
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to RPN system.
    '''

    DEFAULT_PROMPT = '> '
    META_HELP = ('help', '?')
    META_QUIT = ('quit', 'exit', 'q')
    META_BATCH = ('batch',)

    def dumper(self):
        '''
        Dump all tokens, their kind, and operator arity.
        '''
        lexer = Lexer()
        print('<kind>\t<repr(text)>\t<arity>')
        for line in self.args.expressions:
            try:
                for token in lexer.lex(line):
                    print(token.kind,
                          repr(token.text),
                          Machine.ARITY.get(token.name),
                          sep='\t')
            except RPNError as e:
                print(e.args[0], file=stderr)

    def printhelp(self):
        print(HELP)

    def batch(self):
        '''
        Run the built-in example expressions on the session's machine.

        The stack is cleared after each example, so it is empty afterwards.
        '''
        print()
        print('Batch demonstration')
        print(RULE)
        for i, (expression, description) in enumerate(BATCH, 1):
            print()
            print('#{} {}'.format(i, description))
            print('Expression: {}'.format(expression))
            self.dispatcher.feed(expression)
            if not self.machine.isempty():
                print('Result: {}'.format(
                    format_result(self.machine.result())))
            self.machine.clear()
            if i < len(BATCH):
                print(THIN_RULE)
        print()
        print(RULE)
        print('Batch demonstration done!')

    def farewell(self):
        print('Thanks for using the RPN calculator!')
        print('Completed {} calculation(s) this session'
              .format(self.calculations))

    def executor(self):
        '''
        Run machine (RPN calculator).
        '''
        self.calculations = 0
        if self._interactive():
            print(BANNER)
        for line in self.args.expressions:
            line = line.rstrip('\r\n').strip(' \t')
            if not line:
                continue
            command = line.lower()
            if command in self.META_QUIT:
                break
            elif command in self.META_BATCH:
                self.batch()
            elif command in self.META_HELP:
                self.printhelp()
            elif self.dispatcher.feed(line) is QUIT:
                break
            elif not self.machine.isempty():
                self.calculations += 1
                print('Result: {}'.format(
                    format_result(self.machine.result())))
        self.farewell()

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        lexer = Lexer()
        print(lexer.LEXEME)

    def _prompting_input(self):
        '''
        Return prompting stdin.__iter__ decorator...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           isatty(stdin.fileno()) and isatty(stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT)
        else:
            return stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(description='RPN calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true',
                                          help='log tracebacks of bad input')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions',
                                       help='lines to run instead of stdin')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-b', '--batch', self.batch),
                                      ('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=stdin)
        self.calculations = 0
        self.machine = Machine(trace=print)
        self.dispatcher = Dispatcher(self.machine, helper=self.printhelp)

    def _interactive(self):
        return isinstance(self.args.expressions, InteractiveInput)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.

        Returns the exit status.
        '''
        self.args = self.argument_parser.parse_args(args)
        logging.basicConfig(level=logging.DEBUG if self.args.verbose
                            else logging.WARNING,
                            stream=stderr)
        # Only the line readers care whether stdin is a terminal
        if self.args.expressions is stdin and \
           self.args.action in (self.executor, self.dumper):
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            exit(1)
        return 0


def main(args=None):
    '''
    Console entry point. Returns 1 if the calculator cannot start.
    '''
    try:
        cli = CLI()
    except Exception:
        logger.exception('Cannot start RPN calculator')
        return 1
    return cli.run(args=args)
