
from justargs.utils import format_short_label, format_long_label


class JustArgsException(Exception):
    """The basest base exception justargs has. Rarely directly
    instantiated if ever, but useful for catching.
    """
    pass


class ConfigurationError(JustArgsException, ValueError):
    """Raised when the switch mappings handed to a SwitchRegistry
    contradict themselves or contain keys which could never match a
    token. This always indicates a bug in the calling program, not bad
    user input, and is raised before any token is read.
    """
    pass


class DuplicateSwitch(ConfigurationError):
    """Raised when the same short character or long name is registered
    under more than one category (option, positive flag, negative
    flag).
    """
    @classmethod
    def from_keys(cls, short_keys, long_keys):
        labels = ([format_short_label(k) for k in short_keys]
                  + [format_long_label(k) for k in long_keys])
        msg = ('switches registered under more than one of option,'
               ' positive flag, and negative flag: %s' % ', '.join(labels))
        ret = cls(msg)
        ret.short_keys = tuple(short_keys)
        ret.long_keys = tuple(long_keys)
        return ret


class ArgumentSyntaxError(JustArgsException):
    """A base exception used for all errors raised while scanning
    tokens. Carries the zero-based *index* of the offending token in
    the original argument sequence.

    Many subtypes have a ".from_parse()" classmethod that creates an
    exception message from the values available during the parse
    process.

    Args:
       index (int): Position of the offending token, at least 0.
       message (str): A human-readable description of the problem.
       argv (tuple): The parsed tokens, if known. Parser sets this
          before the error leaves :meth:`Parser.parse`.
    """
    def __init__(self, index, message, argv=None):
        if index < 0:
            raise ValueError('expected index >= 0, not: %r' % index)
        super(ArgumentSyntaxError, self).__init__(message)
        self.index = index
        self.argv = tuple(argv) if argv is not None else None

    @property
    def message(self):
        return self.args[0]

    @property
    def token(self):
        "The offending token, or None if the argv is unknown."
        if self.argv is None or self.index >= len(self.argv):
            return None
        return self.argv[self.index]


class UnknownSwitch(ArgumentSyntaxError):
    """
    Raised when a short or long switch is not registered in any category.
    """
    @classmethod
    def from_parse(cls, argv, index, label):
        msg = 'unrecognized switch "%s" in argument %s' % (label, index)
        if label != argv[index]:
            msg += ' (%r)' % argv[index]
        return cls(index, msg, argv=argv)


class MissingOptionValue(ArgumentSyntaxError):
    """Raised when an option switch is the last token, leaving nothing to
    consume as its value.
    """
    @classmethod
    def from_parse(cls, argv, index, label):
        msg = 'option %s requires a value but none was given' % label
        return cls(index, msg, argv=argv)


class UnexpectedFlagValue(ArgumentSyntaxError):
    """Raised when a long flag is given an attached value, as in
    ``--verbose=yes``. Flags never take a value.
    """
    @classmethod
    def from_parse(cls, argv, index, label, value):
        msg = 'flag %s does not take a value, got: %r' % (label, value)
        return cls(index, msg, argv=argv)


class MisplacedBatchOption(ArgumentSyntaxError):
    """Raised when a short option appears anywhere but last in a batch of
    short switches, as in ``-xyz`` where ``-y`` takes a value. The rest
    of the batch would otherwise be silently lost.
    """
    @classmethod
    def from_parse(cls, argv, index, label):
        msg = ('option %s must be the last switch in batch %r'
               % (label, argv[index]))
        return cls(index, msg, argv=argv)


class MissingSwitchName(ArgumentSyntaxError):
    """
    Raised for a long switch with an attached value but no name, e.g., ``--=value``.
    """
    @classmethod
    def from_parse(cls, argv, index):
        msg = 'expected a switch name before "=" in %r' % argv[index]
        return cls(index, msg, argv=argv)
