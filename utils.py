"""
General utility functions for the CLI application.
"""

from rich.console import Console

console: Console = Console(stderr=True)

_verbose = False


def set_verbose(enabled: bool) -> None:
    """Turn debug output on or off for the rest of the process."""
    global _verbose
    _verbose = enabled


def debug(
    *values: object,
    sep: str = " ",
    end: str = "\n",
) -> None:
    """
    Print debug message with orange bold formatting.

    This utility function formats and prints debug messages to stderr using
    Rich's styling capabilities. Messages are only printed once verbose mode has
    been enabled with `set_verbose(True)` (the CLI's `--verbose` flag).

    Args:
        *values: Variable number of objects to print. All values are converted to strings.
        sep: Separator string between values. Defaults to a single space.
        end: String appended after the last value. Defaults to newline.

    Returns:
        None: This function only prints to console and returns nothing.
    """
    if not _verbose:
        return

    if not values:
        console.print(end=end)
        return

    # Convert all values to strings
    str_values = [str(v) for v in values]

    # Join with separator
    message = sep.join(str_values)

    # markup=False: paths may contain square brackets
    console.print(f"DEBUG: {message}", end=end, style="orange1", markup=False)
