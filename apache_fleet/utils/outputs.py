"""
Stack output helpers.

Resolves stack outputs and writes them to a dotenv-style file so local
tooling (smoke tests, ssh helpers) can pick up addresses without calling
``pulumi stack output``.
"""

import json
from pathlib import Path
from typing import Any

import pulumi


def _format_value(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return json.dumps(value, sort_keys=True)
    return str(value)


def render_env(values: dict[str, Any]) -> str:
    """
    Render resolved output values as KEY=value lines.

    Args:
        values: Output name to resolved value

    Returns:
        File content with upper-cased keys, one per line
    """
    lines = [f"{key.upper()}={_format_value(value)}" for key, value in values.items()]
    return "\n".join(lines) + "\n"


def write_outputs_to_env(
    outputs: dict[str, pulumi.Input[Any]],
    filename: str,
    directory: str | Path | None = None,
) -> pulumi.Output[str]:
    """
    Write stack outputs to a dotenv file once they resolve.

    Nothing is written during previews since values are not known yet.

    Args:
        outputs: Output name to Pulumi input/output value
        filename: Name of the file to write
        directory: Target directory (defaults to the working directory)

    Returns:
        Output resolving to the path of the file
    """
    path = Path(directory or Path.cwd()) / filename

    def _write(resolved: dict[str, Any]) -> str:
        if pulumi.runtime.is_dry_run():
            return str(path)
        path.write_text(render_env(resolved))
        pulumi.log.info(f"Wrote {len(resolved)} outputs to {path}")
        return str(path)

    return pulumi.Output.all(**outputs).apply(_write)
