"""Error types raised while parsing and replaying a diff script"""


class HdiffError(Exception):
    """Base class for every fatal report-generation error."""


class MalformedOperation(HdiffError, ValueError):
    """A diff command line matches none of the accepted range grammars."""


class UnknownOperation(HdiffError, ValueError):
    """A diff command uses an operation letter other than a, d or c."""


class TruncatedScript(HdiffError):
    """The diff script and the file contents disagree on line counts."""


class PrematureEOF(TruncatedScript):
    """A file ran out of lines before the diff script said it would."""


class LostSynchronization(TruncatedScript):
    """A cursor ended an operation somewhere other than the operation's range end."""


class DuplicateHighlightColors(HdiffError, ValueError):
    """The add, change and delete highlight colours are not all distinct."""


class ExternalToolFailure(HdiffError, RuntimeError):
    """The line-diff program failed or produced no output."""
