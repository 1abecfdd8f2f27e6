"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.text import Text

from reignstat.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from reignstat.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    answers = result.data.get("answers")
    if answers and isinstance(answers, list):
        return "\n".join(str(a.get("answer", "")) for a in answers)

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    label = Text("OK", style="reign.ok")
    op = Text(f"  {result.op}", style="reign.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    console.print(Text(f"  {key}: ", style="reign.key"), str(value), sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    label = Text("ERROR", style="reign.error")
    op = Text(f"  {result.op}", style="reign.op")
    if err is None:
        console.print(label, op, Text(" — "), "Unknown error")
        return

    messages = err.detail.get("messages")
    if messages:
        # Validation failures list every violated rule on its own line.
        console.print(label, op, Text(" — "), f"{len(messages)} rule(s) violated")
        for line in messages:
            console.print(Text("  - ", style="reign.error"), line, sep="")
    else:
        console.print(label, op, Text(" — "), err.message)

    if verbose and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Operation renderers ───────────────────────────────────────────────


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    count = result.data.get("count", 0)
    console.print(f"[reign.ok]OK[/reign.ok]  {count} rulers passed validation.")
    if verbose:
        _field(console, "source", result.data.get("source", ""))
        _render_meta(console, result)


def _render_report(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    answers: list[dict[str, Any]] = result.data.get("answers", [])
    for index, qa in enumerate(answers, start=1):
        console.print(
            Text(f"Q{index}  ", style="reign.id"),
            Text(str(qa.get("question", "")), style="reign.question"),
            sep="",
        )
        console.print(Text(f"    {qa.get('answer', '')}"))
    if verbose:
        _render_meta(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


_OP_RENDERERS: dict[str, Any] = {
    "check": _render_check,
    "report": _render_report,
}
