from .conditional import ConditionalStack, IfStackError, render_levels
from .config import Config
from .lexer import Lexer, DirectiveError


class Diagnostic:
    def __init__(self, line, kind, message):
        self.line = line
        self.kind = kind
        self.message = message

    def to_dict(self):
        return {"line": self.line, "kind": self.kind, "message": self.message}

    def __repr__(self):
        return f"Diagnostic({self.kind}, {repr(self.message)}, Line:{self.line})"


class PreprocessError(Exception):
    def __init__(self, diagnostic, result=None):
        self.diagnostic = diagnostic
        self.result = result  # rows handled before the failing line
        super().__init__(f"{diagnostic.line}: {diagnostic.message}")


class TraceRow:
    def __init__(self, line, source, output, levels, error=None):
        self.line = line
        self.source = source
        self.output = output
        self.levels = levels
        self.error = error

    @property
    def emitted(self):
        return self.output is not None

    def render_levels(self):
        return render_levels(self.levels)


class Result:
    def __init__(self):
        self.rows = []
        self.diagnostics = []

    @property
    def output(self):
        return [row.output for row in self.rows if row.emitted]

    @property
    def ok(self):
        return not self.diagnostics


class Preprocessor:
    """
    Drives a ConditionalStack from a stream of lines.

    Exactly one stack operation is made per line; TEXT lines are emitted when
    the stack is active after the line has been handled.
    """

    def __init__(self, config=None, stack=None):
        self.config = config if config is not None else Config()
        self.stack = stack if stack is not None else ConditionalStack()
        self.lexer = Lexer()
        self.diagnostics = []

    def _report(self, line, kind, message):
        diag = Diagnostic(line, kind, message)
        if self.config.strict:
            raise PreprocessError(diag)
        self.diagnostics.append(diag)
        return diag

    def process_line(self, text, lineno):
        error = None
        output = None
        try:
            token = self.lexer.classify(text, lineno)
        except DirectiveError as e:
            diag = self._report(lineno, "MISSING_ARGUMENT", e.message)
            return TraceRow(lineno, text.rstrip(), None, self.stack.snapshot(), diag)

        try:
            if token.type == 'IF':
                self.stack.push_if(self.config.resolve(token.value))
            elif token.type == 'ELSE':
                self.stack.take_else()
            elif token.type == 'ENDIF':
                self.stack.pop_endif()
            elif self.stack.is_active():
                output = token.value
        except IfStackError as e:
            error = self._report(lineno, e.kind.name, e.message)

        return TraceRow(lineno, token.text, output, self.stack.snapshot(), error)

    def process(self, lines):
        if isinstance(lines, str):
            lines = lines.splitlines()

        self.stack.reset()
        self.diagnostics = []
        result = Result()
        lineno = 0
        try:
            for lineno, line in enumerate(lines, 1):
                result.rows.append(self.process_line(line, lineno))

            if self.stack:
                self._report(lineno, "UNCLOSED_IF",
                             f"{len(self.stack)} conditional block(s) still open at end of input")
        except PreprocessError as e:
            e.result = result
            raise

        result.diagnostics = self.diagnostics
        return result

    def process_file(self, path, encoding='utf-8'):
        with open(path, 'r', encoding=encoding) as f:
            return self.process(f.read().splitlines())
