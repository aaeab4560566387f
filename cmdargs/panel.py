"""Rich-based rendering of parse errors, for callers that report errors to a terminal."""

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from rich.console import Console
    from rich.panel import Panel


def ErrorPanel(message: Any, title: str = "Error", style: str = "red") -> "Panel":  # noqa: N802
    """Create a :class:`~rich.panel.Panel` with a consistent style.

    .. code-block:: text

        ╭─ Error ──────────────────────────────────╮
        │ Unknown option: "foo".                   │
        ╰──────────────────────────────────────────╯

    Parameters
    ----------
    message: Any
        The body of the panel will be filled with the stringified version of the message.
    title: str
        Title of the panel that appears in the top-left corner.
    style: str
        Rich `style <https://rich.readthedocs.io/en/stable/style.html>`_ for the panel border.
    """
    from rich import box
    from rich.panel import Panel
    from rich.text import Text

    return Panel(
        Text(str(message), "default"),
        title=title,
        style=style,
        box=box.ROUNDED,
        expand=True,
        title_align="left",
    )


def print_error(error: Exception, console: Optional["Console"] = None) -> None:
    """Print ``error`` in an :func:`ErrorPanel`.

    The console is resolved from ``console``, then the error's own ``console`` attribute,
    then a new :class:`~rich.console.Console` writing to stderr.
    """
    if console is None:
        console = getattr(error, "console", None)
    if console is None:
        from rich.console import Console

        console = Console(stderr=True)
    console.print(ErrorPanel(error))
