
def format_short_label(char):
    "Turn a short switch key into its command-line form (e.g., 'v' -> -v)."
    return '-' + char


def format_long_label(name):
    "Turn a long switch key into its command-line form (e.g., 'verbose' -> --verbose)."
    return '--' + name


def format_exp_repr(obj, pos_names, kw_names=()):
    """Format an expression-style repr, one which looks like the
    instantiation of the object, e.g., ``Switch('--verbose', 'verbose',
    parse_as=True)``.

    Attributes named in *pos_names* are rendered positionally, those
    in *kw_names* as keywords.
    """
    args = [getattr(obj, name) for name in pos_names]
    kw_items = [(name, getattr(obj, name)) for name in kw_names]
    return format_invocation(obj.__class__.__name__, args, kw_items)


def format_invocation(name, args=(), kw_items=()):
    "Render a call expression like ``name(*args, **kwargs)`` from its parts."
    a_text = ', '.join([repr(a) for a in args])
    kw_text = ', '.join(['%s=%r' % (k, v) for k, v in kw_items])

    all_args_text = a_text
    if all_args_text and kw_text:
        all_args_text += ', '
    all_args_text += kw_text

    return '%s(%s)' % (name, all_args_text)
