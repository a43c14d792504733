"""Module-local command-line options.

A module that has a setting (for instance, whether to print its log) declares
a module-level Option next to the code that reads it:

    verbose = Option("verbose", bool, False, description="...")

and reads `verbose.value` at the point of use.  The driver then calls
`setup` to add a flag for every Option declared so far to an argparse parser
and `read` to store the parsed values back into those Options.
"""

# Every Option ever created, in declaration order.
_OPTS = []

# Values that override defaults, including for Options whose module has not
# been imported yet (see `restore`).
_DEFAULT_VALUE_OVERRIDES = {}

class Option(object):
    def __init__(self, name, type, default, description="", metavar=None):
        assert type in (bool, str, int)
        self.name = name
        self.description = description
        self.type = type
        self.default = default
        self.value = _DEFAULT_VALUE_OVERRIDES.get(name, default)
        self.metavar = metavar
        _OPTS.append(self)

    @property
    def argname(self):
        """The flag name (without leading dashes) for this option.

        Boolean options that default to True are exposed as "--no-NAME".
        """
        if self.type is bool and self.default:
            return "no-" + self.name
        return self.name

    @property
    def dest(self):
        return self.argname.replace("-", "_")

    def __bool__(self):
        raise Exception(
            "An Option was used as a boolean. " +
            "Read its value with `_.value`.")

    def __repr__(self):
        return "Option({!r}, {}, {!r})".format(self.name, self.type.__name__, self.default)

def setup(parser):
    """Add a flag for every declared Option to `parser` (or argument group)."""
    for o in _OPTS:
        if o.type is bool:
            parser.add_argument("--" + o.argname, action="store_true", default=False, help=o.description)
        else:
            default_text = "default={!r}".format(o.default)
            parser.add_argument("--" + o.argname,
                metavar=o.metavar,
                type=o.type,
                default=o.value,
                help="{} ({})".format(o.description, default_text) if o.description else default_text)

def read(args):
    """Store the values parsed by a parser prepared with `setup`."""
    for o in _OPTS:
        value = getattr(args, o.dest)
        if o.type is bool and o.default:
            value = not value
        o.value = o.type(value)

def snapshot():
    """Produce a snapshot of current option values."""
    return { o.name : o.value for o in _OPTS }

def restore(snap):
    """Restore a snapshot of option values."""
    global _DEFAULT_VALUE_OVERRIDES
    for o in _OPTS:
        o.value = snap.get(o.name, o.default)
    _DEFAULT_VALUE_OVERRIDES = dict(snap)
