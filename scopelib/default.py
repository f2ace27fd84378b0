def default_or_raise(default_value, message=None):
    """
    Resolve the fallback of a lookup that found no entry.

    Lookup accessors accept a default that is either a plain value, returned as the result of the
    miss, or an exception instance, which is raised instead. This lets one accessor serve both the
    soft form (``get(key)``) and the hard form (``get(key, KeyError(...))``) of a lookup.

    Parameters:
    default_value (any): The fallback value, or an exception instance to raise.
    message (str, optional): Context appended to the exception's message before it is raised.

    Returns:
    any: default_value, if it is not an exception.

    Raises:
    Exception: default_value itself, when it is an exception instance.
    """
    if isinstance(default_value, Exception):
        if message:
            raise _with_comment(default_value, message)
        raise default_value

    return default_value


def _with_comment(exception, message):
    if exception.args and isinstance(exception.args[0], str):
        exception.args = (f"{exception.args[0]} | {message}",) + exception.args[1:]
    else:
        # non-string first argument: keep it and put the message in front
        exception.args = (message,) + exception.args
    return exception
