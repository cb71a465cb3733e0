
import logging

from boltons.iterutils import redundant
from boltons.dictutils import FrozenDict

from justargs.errors import ConfigurationError, DuplicateSwitch
from justargs.utils import format_short_label, format_long_label, format_exp_repr


log = logging.getLogger(__name__)


def _ensure_mapping(mapping, arg_name):
    if mapping is None:
        raise TypeError('expected mapping for %s, not None' % arg_name)
    if not callable(getattr(mapping, 'items', None)):
        raise TypeError('expected mapping for %s, not: %r' % (arg_name, mapping))
    return FrozenDict(mapping.items())


def _validate_short_key(char):
    if not isinstance(char, str) or len(char) != 1:
        raise ConfigurationError('short switch keys must be exactly one'
                                 ' character, not: %r' % (char,))
    return char


def _validate_long_key(name):
    if not name or not isinstance(name, str):
        raise ConfigurationError('expected non-zero length string for long'
                                 ' switch key, not: %r' % (name,))
    if '=' in name:
        # the name would be split at the "=" and never match
        raise ConfigurationError('long switch keys must not contain "=", not: %r' % name)
    return name


def _validate_name(name, label):
    if not isinstance(name, str):
        raise ConfigurationError('expected string for the name of switch'
                                 ' %s, not: %r' % (label, name))
    return name


class Switch(object):
    """A single registered switch, as found by the SwitchRegistry
    lookups and consumed by the Parser.

    Args:
       label (str): The command-line form of the switch, e.g., ``-v``
          or ``--verbose``.
       name (str): The logical name under which values are collected
          in the parse result. Several switches may share a name.
       parse_as: ``str`` for options, which take one string value. For
          flags, the value stored on each occurrence: ``True`` for
          positive flags and ``False`` for negative flags.
    """
    def __init__(self, label, name, parse_as):
        self.label = label
        self.name = name
        self.parse_as = parse_as

    @property
    def takes_value(self):
        "True if this switch is an option, consuming a value."
        return callable(self.parse_as)

    def __eq__(self, other):
        if type(self) is not type(other):
            return False
        return ((self.label, self.name, self.parse_as)
                == (other.label, other.name, other.parse_as))

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((self.label, self.name, self.parse_as))

    def __repr__(self):
        return format_exp_repr(self, ['label', 'name'], ['parse_as'])


class SwitchRegistry(object):
    """The SwitchRegistry consolidates the six lookup tables describing
    which switches a program accepts, and what logical name each one
    populates in the parse result. Each table maps a switch key to a
    logical name:

    Args:
       short_options (dict): Single characters to option names.
       long_options (dict): Long switch names to option names.
       short_positive_flags (dict): Single characters to flag names,
          recording ``True`` when present.
       long_positive_flags (dict): Long switch names to flag names,
          recording ``True`` when present.
       short_negative_flags (dict): Single characters to flag names,
          recording ``False`` when present.
       long_negative_flags (dict): Long switch names to flag names,
          recording ``False`` when present.

    All six are required, pass an empty dict for an unused category.
    By convention, short positive flags are lowercase (``-x``), short
    negative flags are uppercase (``-X``) and long negative flags
    carry a prefix (``--no-color``).

    A short key may appear in only one of the three short tables, and
    a long key in only one of the three long tables. Violations raise
    :exc:`DuplicateSwitch` on construction. The tables are copied, so
    later changes to the caller's dicts have no effect.

    SwitchRegistry instances are immutable and safe to share across
    threads and Parsers.
    """
    def __init__(self, short_options, long_options,
                 short_positive_flags, long_positive_flags,
                 short_negative_flags, long_negative_flags):
        self.short_options = _ensure_mapping(short_options, 'short_options')
        self.long_options = _ensure_mapping(long_options, 'long_options')
        self.short_positive_flags = _ensure_mapping(short_positive_flags, 'short_positive_flags')
        self.long_positive_flags = _ensure_mapping(long_positive_flags, 'long_positive_flags')
        self.short_negative_flags = _ensure_mapping(short_negative_flags, 'short_negative_flags')
        self.long_negative_flags = _ensure_mapping(long_negative_flags, 'long_negative_flags')

        # (parse_as, short table, long table), in lookup precedence order
        categories = [(str, self.short_options, self.long_options),
                      (True, self.short_positive_flags, self.long_positive_flags),
                      (False, self.short_negative_flags, self.long_negative_flags)]

        short_keys, long_keys = [], []
        for _, short_map, long_map in categories:
            short_keys.extend([_validate_short_key(k) for k in short_map])
            long_keys.extend([_validate_long_key(k) for k in long_map])

        dupe_short_keys = redundant(short_keys)
        dupe_long_keys = redundant(long_keys)
        if dupe_short_keys or dupe_long_keys:
            log.debug('rejecting duplicate switch keys: short=%r, long=%r',
                      dupe_short_keys, dupe_long_keys)
            raise DuplicateSwitch.from_keys(dupe_short_keys, dupe_long_keys)

        self._short_map = {}
        self._long_map = {}
        for parse_as, short_map, long_map in categories:
            for char, name in short_map.items():
                label = format_short_label(char)
                self._short_map[char] = Switch(label, _validate_name(name, label), parse_as)
            for key, name in long_map.items():
                label = format_long_label(key)
                self._long_map[key] = Switch(label, _validate_name(name, label), parse_as)
        return

    def get_short(self, char):
        "Returns the Switch registered for short key *char*, or None."
        return self._short_map.get(char)

    def get_long(self, name):
        "Returns the Switch registered for long key *name*, or None."
        return self._long_map.get(name)

    def get_switches(self):
        """Returns a list of all registered Switches, short before long,
        options before positive flags before negative flags.
        """
        return list(self._short_map.values()) + list(self._long_map.values())

    def __eq__(self, other):
        if type(self) is not type(other):
            return False
        return (self._short_map == other._short_map
                and self._long_map == other._long_map)

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((frozenset(self._short_map.items()),
                     frozenset(self._long_map.items())))

    def __repr__(self):
        cn = self.__class__.__name__
        labels = [s.label for s in self.get_switches()]
        return '<%s switches=%r>' % (cn, labels)
