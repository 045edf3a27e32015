"""Small text-layout helpers used in error reports."""

_PADDING = 4
_FULL = 40


def repeat(item: object, count: int) -> str:
    """Return the text of ``item`` repeated ``count`` times."""
    return str(item) * count


def block(title: str, body: str) -> str:
    """Frame ``body`` between a titled rule and a closing rule of dashes."""
    rest = _FULL - _PADDING - len(title.encode("utf-8")) - 2
    if rest < 0:
        raise ValueError(f"block title too long: {title!r}")
    newline = "" if not body or body.endswith("\n") else "\n"
    return (
        f"\n{repeat('-', _PADDING)} {title} {repeat('-', rest)}\n"
        f"{body}{newline}{repeat('-', _FULL)}"
    )