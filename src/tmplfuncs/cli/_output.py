"""Result and error printing shared by every command.

Commands print one result: a JSON document on stdout with ``--json``, plain
text otherwise. Failures always go to stderr.
"""
from __future__ import annotations

import json
import sys
from typing import Any, Optional


class CommandOutput:
    def __init__(self, json_mode: bool = False) -> None:
        self.json_mode = json_mode

    @staticmethod
    def _dump(payload: Any) -> str:
        return json.dumps(payload, indent=2, default=str)

    def result(self, payload: Any, text: Optional[str] = None) -> None:
        """Print ``payload`` as JSON, or ``text`` (default ``str(payload)``) in text mode."""
        if self.json_mode:
            print(self._dump(payload))
        else:
            print(str(payload) if text is None else text)

    def failure(self, error: BaseException, message: Optional[str] = None) -> None:
        """Report ``error`` on stderr; JSON mode includes its class name and context."""
        message = message or str(error)
        if not self.json_mode:
            print(f"Error: {message}", file=sys.stderr)
            return
        payload = {"error": type(error).__name__, "message": message}
        if getattr(error, "context", None):
            payload["context"] = error.context
        print(self._dump(payload), file=sys.stderr)


__all__ = ["CommandOutput"]
