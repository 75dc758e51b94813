#!/usr/bin/python3


class BtrfsError(Exception):

    def __init__(self, message, line=None):
        self.line = line
        if line is not None:
            message = "{}: {}".format(message, line)
        super().__init__(message)


class InsufficientOutputError(BtrfsError):

    def __init__(self, message, lines):
        self.lines = list(lines)
        super().__init__("{}, check permissions: {!r}".format(message, "\n".join(self.lines)))


class UnexpectedFormatError(BtrfsError):
    pass


class MalformedFieldError(BtrfsError):
    pass


class MalformedSizeError(MalformedFieldError):
    pass


class UnknownRedundancyLevelError(BtrfsError):

    def __init__(self, level):
        self.level = level
        super().__init__("Unknown redundancy level {!r}".format(level))
