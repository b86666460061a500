"""Uniform envelopes returned by every tool invocation.

A tool call resolves to exactly one of:
- `Success`: the upstream JSON body, passed through untouched
- `Failure`: an error message plus a status code

Both serialize to the JSON text placed in the single text content item of the
MCP tool result. Failures serialize as ``{"error": <message>, "status": <int>}``.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Success:
    payload: Any

    ok = True

    def to_text(self) -> str:
        return json.dumps(self.payload)


@dataclass(frozen=True)
class Failure:
    message: str
    status: int = 403

    ok = False

    def to_text(self) -> str:
        return json.dumps({"error": self.message, "status": self.status})


ResponseEnvelope = Union[Success, Failure]

