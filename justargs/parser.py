
import logging

from boltons.iterutils import unique
from boltons.dictutils import FrozenDict, OrderedMultiDict as OMD

from justargs.errors import (ArgumentSyntaxError,
                             UnknownSwitch,
                             MissingOptionValue,
                             UnexpectedFlagValue,
                             MisplacedBatchOption,
                             MissingSwitchName)
from justargs.registry import SwitchRegistry
from justargs.utils import format_exp_repr, format_short_label, format_long_label


log = logging.getLogger(__name__)

SEPARATOR = '--'


def _ensure_argv(argv):
    if argv is None:
        raise TypeError('expected sequence of strings for argv, not None')
    if isinstance(argv, (str, bytes)):
        # a lone string would otherwise be scanned character by character
        raise TypeError('expected sequence of strings for argv, not: %r' % (argv,))
    argv = tuple(argv)
    for i, arg in enumerate(argv):
        if not isinstance(arg, str):
            raise TypeError('expected string for argument %s, not: %r' % (i, arg))
    return argv


def _ensure_max_posargs(max_posargs):
    if max_posargs is None:
        raise TypeError('expected integer for max_posargs, not None')
    if isinstance(max_posargs, bool) or not isinstance(max_posargs, int):
        raise TypeError('expected integer for max_posargs, not: %r' % (max_posargs,))
    if max_posargs < 0:
        raise ValueError('expected max_posargs >= 0, not: %r' % max_posargs)
    return max_posargs


def _consume_value(argv, index, switch):
    "Returns the index and text of the value following the switch at *index*."
    if index + 1 >= len(argv):
        raise MissingOptionValue.from_parse(argv, index, switch.label)
    return index + 1, argv[index + 1]


def _freeze_values(mapping):
    return FrozenDict([(k, tuple(v)) for k, v in mapping.items()])


def _omd_to_lists(omd):
    # keys(multi=True) preserves every insertion, so unique() yields
    # first-occurrence order
    return dict([(k, omd.getlist(k)) for k in unique(omd.keys(multi=True))])


class ParsedArgs(object):
    """The result of :meth:`Parser.parse`, instances of this type hold
    everything the argument list contained, once switches have been
    resolved. Instances are immutable, compare by value, and are
    hashable.

    Args:
       posargs (list): Positional arguments, up to the Parser's
          *max_posargs*, in the order they appeared.
       overflow_posargs (list): Positional arguments beyond
          *max_posargs*, in the order they appeared.
       options (dict): Mapping of logical option names to the list of
          string values given, one per occurrence.
       flags (dict): Mapping of logical flag names to the list of
          booleans given, one per occurrence.

    All containers are copied, and exposed as tuples and read-only
    mappings. Names which did not appear on the command line are absent
    from *options* and *flags*, and mapping order follows the first
    appearance of each name.
    """
    def __init__(self, posargs, overflow_posargs, options, flags):
        self._posargs = tuple(posargs)
        self._overflow_posargs = tuple(overflow_posargs)
        self._options = _freeze_values(options)
        self._flags = _freeze_values(flags)

    @property
    def posargs(self):
        return self._posargs

    @property
    def overflow_posargs(self):
        return self._overflow_posargs

    @property
    def options(self):
        return self._options

    @property
    def flags(self):
        return self._flags

    def get_option(self, name, default=None):
        "Returns the most recent value given for option *name*, else *default*."
        values = self._options.get(name)
        return values[-1] if values else default

    def get_flag(self, name, default=None):
        """Returns the most recent boolean given for flag *name*, else
        *default*. Handy for pairs like ``--color`` / ``--no-color``
        which share a name, where the last switch wins.
        """
        values = self._flags.get(name)
        return values[-1] if values else default

    def _astuple(self):
        return (self._posargs, self._overflow_posargs, self._options, self._flags)

    def __eq__(self, other):
        if type(self) is not type(other):
            return False
        return self._astuple() == other._astuple()

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash(self._astuple())

    def __repr__(self):
        return format_exp_repr(self, ['posargs', 'overflow_posargs', 'options', 'flags'])


class Parser(object):
    """The Parser turns a list of strings into a :class:`ParsedArgs`,
    according to the switches in its :class:`SwitchRegistry`.

    Args:
       registry (SwitchRegistry): The accepted switches and the names
          they populate.
       max_posargs (int): How many positional arguments go into
          ``ParsedArgs.posargs``. Any beyond this many are collected in
          ``ParsedArgs.overflow_posargs``. Pass 0 to send all
          positional arguments to the overflow.

    The grammar is the conventional one:

    * An *option* takes a value, either the next argument (``-o
      out.txt``, ``--output out.txt``) or, for long options only,
      attached with an equals sign (``--output=out.txt``).
    * A *flag* takes no value. Every occurrence records ``True`` for
      positive flags and ``False`` for negative flags.
    * Short switches may be batched: ``-abc`` is ``-a -b -c``. Only
      the last switch of a batch may be an option, taking the next
      argument as its value.
    * ``--`` ends switch parsing, every later argument is positional,
      including a second ``--``. A lone ``-`` is positional (by
      convention, stdin).
    * Switches and positional arguments may be freely interleaved.

    Parsers hold no state between calls, and may be shared across
    threads.
    """
    def __init__(self, registry, max_posargs):
        if not isinstance(registry, SwitchRegistry):
            raise TypeError('expected SwitchRegistry for registry, not: %r' % (registry,))
        self.registry = registry
        self.max_posargs = _ensure_max_posargs(max_posargs)

    def parse(self, argv):
        """This method takes a list of strings and converts them into a
        :class:`ParsedArgs` according to the configured switches.

        Args:
           argv (list): A required list of strings. Unlike
              ``sys.argv``, it should not include the program name.

        This method raises :exc:`ArgumentSyntaxError` (or one of its
        subtypes) at the first argument that fails to parse. The
        error's *argv* attribute holds the arguments parsed.
        """
        argv = _ensure_argv(argv)
        try:
            ret = self._parse_args(argv)
        except ArgumentSyntaxError as ase:
            ase.argv = argv
            log.debug('failed to parse argument %s of %r: %s', ase.index, argv, ase)
            raise
        log.debug('parsed %s arguments into %s posargs, %s overflow posargs,'
                  ' %s options, and %s flags', len(argv), len(ret.posargs),
                  len(ret.overflow_posargs), len(ret.options), len(ret.flags))
        return ret

    def _parse_args(self, argv):
        all_posargs = []
        options, flags = OMD(), OMD()

        separated = False
        index = 0
        while index < len(argv):
            arg = argv[index]
            if separated:
                all_posargs.append(arg)
            elif arg == SEPARATOR:
                separated = True
            elif arg.startswith('--'):
                index = self._parse_long_switch(argv, index, options, flags)
            elif arg.startswith('-') and len(arg) > 1:
                index = self._parse_short_batch(argv, index, options, flags)
            else:
                all_posargs.append(arg)
            index += 1

        max_posargs = self.max_posargs
        return ParsedArgs(all_posargs[:max_posargs], all_posargs[max_posargs:],
                          _omd_to_lists(options), _omd_to_lists(flags))

    def _parse_long_switch(self, argv, index, options, flags):
        """Handle ``--name`` and ``--name=value`` at *index*. Returns the
        index of the last argument consumed.
        """
        arg = argv[index]
        name, eq, attached = arg[2:].partition('=')
        if not eq:
            attached = None
        if not name:
            # bare "--" is the separator, so only "--=value" gets here
            raise MissingSwitchName.from_parse(argv, index)

        switch = self.registry.get_long(name)
        if switch is None:
            raise UnknownSwitch.from_parse(argv, index, format_long_label(name))

        if switch.takes_value:
            if attached is None:
                index, attached = _consume_value(argv, index, switch)
            options.add(switch.name, attached)
        else:
            if attached is not None:
                raise UnexpectedFlagValue.from_parse(argv, index, switch.label, attached)
            flags.add(switch.name, switch.parse_as)
        return index

    def _parse_short_batch(self, argv, index, options, flags):
        """Handle ``-x`` and batches like ``-xyz`` at *index*. Returns the
        index of the last argument consumed.
        """
        chars = argv[index][1:]
        for pos, char in enumerate(chars, 1):
            switch = self.registry.get_short(char)
            if switch is None:
                raise UnknownSwitch.from_parse(argv, index, format_short_label(char))
            if not switch.takes_value:
                flags.add(switch.name, switch.parse_as)
                continue
            if pos < len(chars):
                raise MisplacedBatchOption.from_parse(argv, index, switch.label)
            index, value = _consume_value(argv, index, switch)
            options.add(switch.name, value)
        return index


def parse_args(argv, max_posargs,
               short_options, long_options,
               short_positive_flags, long_positive_flags,
               short_negative_flags, long_negative_flags):
    """Parse *argv* in one call, without building a :class:`Parser`
    first. All arguments are required, see :class:`SwitchRegistry`
    for the six switch tables and :class:`Parser` for *max_posargs*.

    >>> res = parse_args(['-v', '--out', 'a.txt', 'in.txt'], 1,
    ...                  {}, {'out': 'output'}, {'v': 'verbose'}, {}, {}, {})
    >>> res.posargs, res.get_option('output'), res.get_flag('verbose')
    (('in.txt',), 'a.txt', True)

    Raises :exc:`TypeError` if any argument is None,
    :exc:`ConfigurationError` if the switch tables conflict, and
    :exc:`ArgumentSyntaxError` if *argv* fails to parse.
    """
    argv = _ensure_argv(argv)
    registry = SwitchRegistry(short_options, long_options,
                              short_positive_flags, long_positive_flags,
                              short_negative_flags, long_negative_flags)
    return Parser(registry, max_posargs).parse(argv)
