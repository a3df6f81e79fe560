"""
Typed setting values.

Settings are stored as text next to a type tag. A SettingValue is the
decoded form: it is built once when a row is read (or when a request body
arrives) and turned back into text only when written.
"""

import json
import math
from dataclasses import dataclass
from typing import Any

TEXT = "text"
BOOLEAN = "boolean"
NUMBER = "number"
JSON = "json"

TYPES = (TEXT, BOOLEAN, NUMBER, JSON)


@dataclass(frozen=True)
class SettingValue:
    type: str
    value: Any

    @classmethod
    def decode(cls, raw: str | None, type_: str) -> "SettingValue":
        """
        Parse stored text according to its type tag.

        Values that do not parse fall back to the raw string, as do unknown
        type tags.
        """
        raw = raw if raw is not None else ""

        if type_ == BOOLEAN:
            return cls(BOOLEAN, raw.strip().lower() == "true")

        if type_ == NUMBER:
            try:
                return cls(NUMBER, int(raw))
            except ValueError:
                pass
            try:
                number = float(raw)
            except ValueError:
                return cls(NUMBER, raw)
            # inf and nan have no JSON form
            return cls(NUMBER, number if math.isfinite(number) else raw)

        if type_ == JSON:
            try:
                return cls(JSON, json.loads(raw))
            except ValueError:
                return cls(JSON, raw)

        return cls(type_ if type_ in TYPES else TEXT, raw)

    @classmethod
    def from_input(cls, value: Any, type_: str) -> "SettingValue":
        """Wrap a value received in a request body, coercing it to the tag."""
        if type_ not in TYPES:
            raise ValueError(f"Unknown setting type: {type_}")

        if type_ == BOOLEAN:
            if isinstance(value, str):
                return cls.decode(value, BOOLEAN)
            return cls(BOOLEAN, bool(value))
        if type_ == NUMBER and isinstance(value, str):
            return cls.decode(value, NUMBER)
        if type_ == NUMBER and isinstance(value, float) and not math.isfinite(value):
            return cls(NUMBER, str(value))
        if type_ == TEXT and not isinstance(value, str):
            return cls(TEXT, json.dumps(value))
        return cls(type_, value)

    def encode(self) -> str:
        if self.type == BOOLEAN:
            return "true" if self.value else "false"
        if self.type == NUMBER:
            return str(self.value)
        if self.type == JSON:
            return json.dumps(self.value)
        return "" if self.value is None else str(self.value)
