from dataclasses import dataclass, field
from typing import Any, Dict, Optional


def parse_bool(value: Any) -> bool:
    """Lenient boolean: only True or the string "true" (any case) count."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.lower() == "true"
    return False


@dataclass
class ComponentConfig:
    """Generic component configuration."""

    name: str
    params: Dict[str, Any] = field(default_factory=dict)


@dataclass
class StageConfig:
    """Configuration of the NER tagging stage."""

    parse_per_instruction: bool = False
    tagger: ComponentConfig = field(default_factory=lambda: ComponentConfig(name="senna"))

    @staticmethod
    def from_dict(data: Optional[Dict[str, Any]]) -> "StageConfig":
        data = data or {}

        if "parse_per_instruction" in data:
            raw_flag = data["parse_per_instruction"]
        else:
            raw_flag = data.get("PARSE_PER_INSTRUCTION")

        entry = data.get("tagger")
        if entry is None:
            tagger = ComponentConfig(name="senna")
        elif isinstance(entry, str):
            tagger = ComponentConfig(name=entry)
        else:
            tagger = ComponentConfig(name=entry["name"], params=entry.get("params", {}))

        return StageConfig(
            parse_per_instruction=parse_bool(raw_flag),
            tagger=tagger,
        )
