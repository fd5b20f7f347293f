ILLEGAL_CHARS = ("<", ">", ":", '"', "/", "\\", "|", "?", "*")


def first_line(content: str) -> str:
    return content.split("\n", 1)[0].replace("\r", "").strip()


def strip_prefix(line: str, prefixes: list[str]) -> str:
    # first match wins, later candidates are not tried
    for p in prefixes:
        if line.startswith(p):
            return line[len(p):]
    return line


def sanitize_filename(name: str) -> str:
    for ch in ILLEGAL_CHARS:
        name = name.replace(ch, "_")
    return name


def derive_filename(content: str, prefixes: list[str], extension: str) -> str | None:
    """
    Build the target filename from the first clipboard line.
    `prefixes` are the non-empty candidates from Config.prefixes().
    Returns None when that line is empty.
    """
    line = first_line(content)
    if not line:
        return None

    base = strip_prefix(line, prefixes).strip()
    return sanitize_filename(base) + extension
