"""Presentation helpers for style names."""


def humanize_style(style: str) -> str:
    """
    Turn a style directory name into a display label.

    Examples:
        >>> humanize_style("sharp-solid")
        'Sharp Solid'
        >>> humanize_style("duotone")
        'Duotone'
    """
    return " ".join(part.capitalize() for part in style.replace("_", "-").split("-") if part)
