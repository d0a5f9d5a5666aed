import re


class DirectiveError(Exception):
    def __init__(self, message, line=None):
        self.message = message
        self.line = line
        super().__init__(message)


class Token:
    def __init__(self, type, value, line, text=""):
        self.type = type
        self.value = value
        self.line = line
        self.text = text

    def __repr__(self):
        return f"Token({self.type}, {repr(self.value)}, Line:{self.line})"


class Lexer:
    """Classifies each input line as IF, ELSE, ENDIF or TEXT."""

    def __init__(self):
        self.token_specs = [
            ('ENDIF', r'endif(?=\s|$)'),
            ('ELSE', r'else(?=\s|$)'),
            ('IF', r'if(?=\s|$)'),
        ]

        # Keyword is the first word on the line; the IF argument is the next one
        self.keyword_pat = re.compile(
            r'\s*(?:%s)' % '|'.join('(?P<%s>%s)' % pair for pair in self.token_specs),
            re.IGNORECASE)
        self.word_pat = re.compile(r'\S+')

    def classify(self, line, lineno=0):
        text = line.rstrip()
        mo = self.keyword_pat.match(text)
        if mo is None:
            return Token('TEXT', text, lineno, text)

        kind = mo.lastgroup
        if kind == 'IF':
            arg = self.word_pat.search(text, mo.end())
            if arg is None:
                raise DirectiveError("expected token after 'IF'", lineno)
            return Token(kind, arg.group(), lineno, text)
        return Token(kind, None, lineno, text)
