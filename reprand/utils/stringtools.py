"""
A collection of tools for string formatting tasks.
"""

__all__ = ["indent", "deindent"]


def indent(text, numtabs=1, spacespertab=4, tab=None):
    """
    Indents a given multiline string.

    By default, indentation is done using spaces rather than tab characters.
    To use tab characters, specify the tab character explictly, e.g.::

        indent(text, tab='\t')

    Note that in this case ``spacespertab`` is ignored.

    Examples
    --------
    >>> multiline = '''seed = 42
    ... discard_chunk_size = 1024'''
    >>> print(indent(multiline))
        seed = 42
        discard_chunk_size = 1024
    >>> print(indent(multiline, tab='##'))
    ##seed = 42
    ##discard_chunk_size = 1024
    """
    if tab is None:
        tab = " " * spacespertab
    indent = tab * numtabs
    return indent + text.replace("\n", f"\n{indent}")


def deindent(text, numtabs=None, spacespertab=4, docstring=False):
    """
    Returns a copy of the string with the common indentation removed.

    Note that all tab characters are replaced with ``spacespertab`` spaces.

    If the ``docstring`` flag is set, the first line is treated differently and
    is assumed to be already correctly tabulated.

    If the ``numtabs`` option is given, the amount of indentation to remove is
    given explicitly and not the common indentation.

    Examples
    --------
    >>> docstring = '''Name of the environment variable.
    ...     Read once, when reprand is imported.'''
    >>> print(deindent(docstring, docstring=True))
    Name of the environment variable.
    Read once, when reprand is imported.
    """
    text = text.replace("\t", " " * spacespertab)
    lines = text.split("\n")
    # docstrings get their common indentation from line 1 onwards
    start = 1 if docstring else 0
    if docstring and len(lines) < 2:  # nothing to do
        return text
    if numtabs is not None:
        indentlevel = numtabs * spacespertab
    else:
        lineseq = [
            len(line) - len(line.lstrip())
            for line in lines[start:]
            if len(line.strip())
        ]
        indentlevel = min(lineseq) if len(lineseq) else 0
    lines[start:] = [line[indentlevel:] for line in lines[start:]]
    return "\n".join(lines)
