def escape_path(path: str) -> str:
    """
    Quote a filesystem path for a command line: every backslash is doubled
    and the result is wrapped in double quotes.
    """
    return '"' + path.replace("\\", "\\\\") + '"'
