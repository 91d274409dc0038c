from __future__ import annotations

from dataclasses import dataclass

DEFAULT_LENIENT_TAGS = frozenset({"img", "tr"})


@dataclass(frozen=True)
class SelectorConfig:
    # Element names accepted directly after an id fragment.
    lenient_tags: frozenset[str] = DEFAULT_LENIENT_TAGS
