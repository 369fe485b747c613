"""
Mapping from our match ids to the scorecard provider's match ids.

The mapping lives in a JSON file supplied at deploy time:

    {"matches": {"<match_id>": "<provider_id>", ...}, "default": "<provider_id>"}

A flat {"<match_id>": "<provider_id>"} object is accepted too.
"""
import json
import logging
from typing import Dict, Optional

from app.config import settings

logger = logging.getLogger(__name__)


class MatchSourceLookup:
    def __init__(self, mapping: Optional[Dict[str, str]] = None, default: Optional[str] = None):
        self._mapping = {str(k): str(v) for k, v in (mapping or {}).items()}
        self.default = default

    @classmethod
    def from_file(cls, path: str) -> "MatchSourceLookup":
        with open(path, encoding="utf-8") as fh:
            data = json.load(fh)
        if not isinstance(data, dict):
            raise ValueError(f"Match source map in {path} must be a JSON object")
        if "matches" in data:
            return cls(data.get("matches") or {}, data.get("default"))
        return cls(data)

    @classmethod
    def from_settings(cls) -> "MatchSourceLookup":
        path = settings.MATCH_SOURCE_MAP_PATH
        if not path:
            return cls()
        try:
            return cls.from_file(path)
        except FileNotFoundError:
            logger.warning("Match source map %s not found, no provider ids available", path)
            return cls()

    def get(self, match_id: str) -> Optional[str]:
        source_id = self._mapping.get(str(match_id))
        if source_id is None and self.default is not None:
            logger.warning("No provider id mapped for match %s, using default %s", match_id, self.default)
            return self.default
        return source_id

    def __contains__(self, match_id) -> bool:
        return str(match_id) in self._mapping

    def __len__(self) -> int:
        return len(self._mapping)
