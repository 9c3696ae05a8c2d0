# config/resolvers.py
import json
import sys
from pathlib import Path
from typing import Any, Optional, TextIO
from platformdirs import user_log_dir

from deucerating.domain.exceptions import ValidationError

APP = "deucerating"

def default_log_dir() -> Path:
    p = Path(user_log_dir(APP))
    p.mkdir(parents=True, exist_ok=True)
    return p

def resolve_log_dir(log_file: Optional[Path]) -> Path:
    """Log next to an explicit log file, otherwise in the per-user log dir."""
    if log_file is not None:
        return Path(log_file).parent
    return default_log_dir()

def read_answers(source: Optional[str], stdin: Optional[TextIO] = None) -> Any:
    """
    Load a raw answer set for the CLI:
    - None or "-": read JSON from stdin.
    - anything else: read JSON from that file.
    The shape is not checked here; the dispatcher accepts anything.
    """
    if source in (None, "-"):
        stream = stdin or sys.stdin
        text = stream.read()
        origin = "<stdin>"
    else:
        p = Path(source)
        if not p.is_file():
            raise ValidationError(
                f"Answers file not found: {p}",
                field_name="answers",
                field_value=source,
            )
        text = p.read_text(encoding="utf-8")
        origin = str(p)

    if not text.strip():
        return {}
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ValidationError(
            f"Answers in {origin} are not valid JSON: {e}",
            field_name="answers",
        ) from e
