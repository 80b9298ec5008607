"""Private helper utilities."""


def format_gpa(value: float) -> str:
    """Format a GPA the way it is shown to people: two decimal places."""
    return f"{value:.2f}"


def in_jupyter_notebook() -> bool:
    """Determine if the code is being run in a Jupyter notebook."""
    try:
        shell = get_ipython().__class__.__name__  # pyright: ignore
        return shell == "ZMQInteractiveShell"
    except NameError:
        return False
