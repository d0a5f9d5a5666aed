from enum import Enum


class ErrorKind(Enum):
    OK = 0
    ELSE_WITHOUT_IF = 1
    ELSE_ALREADY_TAKEN = 2
    ENDIF_WITHOUT_IF = 3


_MESSAGES = {
    ErrorKind.OK: "no error",
    ErrorKind.ELSE_WITHOUT_IF: "ELSE without IF",
    ErrorKind.ELSE_ALREADY_TAKEN: "already in ELSE branch",
    ErrorKind.ENDIF_WITHOUT_IF: "ENDIF without preceding IF [ELSE]",
}


def strerror(code):
    """Returns the message for an error code (int or ErrorKind)."""
    try:
        kind = code if isinstance(code, ErrorKind) else ErrorKind(code)
    except ValueError:
        return "unknown error"
    return _MESSAGES[kind]


def render_levels(levels):
    return "[" + ", ".join("1" if c else "0" for c in levels) + "]"


class IfStackError(Exception):
    kind = None

    def __init__(self, message=None):
        self.message = message or strerror(self.kind)
        super().__init__(self.message)

    @property
    def code(self):
        return self.kind.value


class ElseWithoutIf(IfStackError):
    kind = ErrorKind.ELSE_WITHOUT_IF


class ElseAlreadyTaken(ElseWithoutIf):
    # Same recovery as ElseWithoutIf, reported under its own code.
    kind = ErrorKind.ELSE_ALREADY_TAKEN


class EndifWithoutIf(IfStackError):
    kind = ErrorKind.ENDIF_WITHOUT_IF


class Level:
    """One open IF: its condition, whether ELSE fired, and the cumulative state."""

    __slots__ = ("raw_condition", "else_taken", "cumulative_active")

    def __init__(self, raw_condition, cumulative_active):
        self.raw_condition = raw_condition
        self.else_taken = False
        self.cumulative_active = cumulative_active

    @property
    def effective_condition(self):
        if self.else_taken:
            return not self.raw_condition
        return self.raw_condition

    def __repr__(self):
        return (f"Level(raw={self.raw_condition}, else={self.else_taken}, "
                f"active={self.cumulative_active})")


class ConditionalStack:
    """
    LIFO of open IF levels.

    Each level stores the AND of its own effective condition with its parent's
    cumulative state, so the active signal is always the top level's stored
    value (True when nothing is open) and ENDIF never recomputes anything.
    """

    def __init__(self):
        self.levels = []

    def reset(self):
        self.levels.clear()

    def __len__(self):
        return len(self.levels)

    def __bool__(self):
        return bool(self.levels)

    @property
    def depth(self):
        return len(self.levels)

    def _parent_active(self, index):
        # index is the position of the level whose parent we want
        if index == 0:
            return True
        return self.levels[index - 1].cumulative_active

    def push_if(self, condition):
        condition = bool(condition)
        parent = self._parent_active(len(self.levels))
        self.levels.append(Level(condition, condition and parent))

    def take_else(self):
        if not self.levels:
            raise ElseWithoutIf()
        top = self.levels[-1]
        if top.else_taken:
            raise ElseAlreadyTaken()
        top.else_taken = True
        top.cumulative_active = (top.effective_condition
                                 and self._parent_active(len(self.levels) - 1))

    def pop_endif(self):
        if not self.levels:
            raise EndifWithoutIf()
        self.levels.pop()

    def is_active(self):
        if not self.levels:
            return True
        return self.levels[-1].cumulative_active

    def snapshot(self):
        return [level.effective_condition for level in self.levels]

    def render(self):
        """Formats the snapshot as the bracketed trace, e.g. "[1, 0, 1]"."""
        return render_levels(self.snapshot())

    def __repr__(self):
        return f"ConditionalStack({self.render()}, active={self.is_active()})"
