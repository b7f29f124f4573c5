"""JSON serialization for Duration values."""

from __future__ import annotations

import json
from typing import Any

from pyduration.duration import Duration


class DurationJSONEncoder(json.JSONEncoder):
    """json.JSONEncoder that encodes Duration values via to_dict()."""

    def default(self, o: Any) -> Any:
        if isinstance(o, Duration):
            return o.to_dict()
        return super().default(o)


def to_json(duration: Duration) -> str:
    """Serialize a Duration to compact JSON."""
    return json.dumps(duration, cls=DurationJSONEncoder, separators=(",", ":"))
