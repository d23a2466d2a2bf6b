"""
Output heuristics for command probes.

Many CLI tools (docker among them) print diagnostics while still exiting 0,
so a zero exit code alone is not trusted as "ready".
"""

ERROR_PATTERNS: tuple[str, ...] = (
    "error",
    "not found",
    "unable",
    "fail",
    "failed",
    "no such file",
    "connection refused",
)


def output_indicates_error(output: str | None) -> bool:
    """True if the output contains any error pattern (case-insensitive)."""
    if not output:
        return False
    lowered = output.lower()
    return any(pattern in lowered for pattern in ERROR_PATTERNS)


def command_succeeded(exit_code: int, output: str | None) -> bool:
    """Zero exit code and no error text in the captured output."""
    return exit_code == 0 and not output_indicates_error(output)
