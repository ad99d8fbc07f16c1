"""Rich renderers for validation results.

Each renderer writes to a Rich Console (backed by StringIO); the caller
gets plain text back when no terminal is attached.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.text import Text

from plident.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from plident.services.result import ServiceResult

_FIELD_ORDER = ("number", "birth_date", "gender", "birth_date_matches", "gender_matches")


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()
    if result.ok:
        _render_valid(result, console)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        code = result.error.code if result.error else "error"
        return f"INVALID {code}"
    return "VALID"


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="plident.key")
    if key == "number":
        v = Text(str(value), style="plident.number")
    elif key.endswith("_matches"):
        v = Text("yes" if value else "no", style="plident.match" if value else "plident.mismatch")
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


def _render_valid(result: ServiceResult, console: Console) -> None:
    console.print(Text("OK", style="plident.ok"), Text(f"  {result.op}", style="plident.op"), sep="")
    for key in _FIELD_ORDER:
        if key in result.data:
            _field(console, key, result.data[key])


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="plident.error")
    op = Text(f"  {result.op}", style="plident.op")
    # messages may be user supplied; Text keeps rich markup out of them
    console.print(label, op, Text(": "), Text(msg), sep="")

    if verbose and err:
        console.print(Text("  detail:", style="dim"))
        console.print(Text(f"    code: {err.code}"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))
