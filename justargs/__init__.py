
from justargs.parser import (Parser,
                             ParsedArgs,
                             parse_args,
                             SEPARATOR)

from justargs.registry import (Switch,
                               SwitchRegistry)

from justargs.errors import (JustArgsException,
                             ConfigurationError,
                             DuplicateSwitch,
                             ArgumentSyntaxError,
                             UnknownSwitch,
                             MissingOptionValue,
                             UnexpectedFlagValue,
                             MisplacedBatchOption,
                             MissingSwitchName)
