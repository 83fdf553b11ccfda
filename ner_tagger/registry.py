"""
Name-to-factory registry for tagger backends.

Backends register themselves on import (see ner_tagger/taggers/) and the
stage builds the one named in StageConfig.tagger.
"""

from typing import Any, Callable, Dict, TypeVar

T = TypeVar("T")


class TaggerRegistry:
    """Maps backend names used in stage config to tagger factories."""

    def __init__(self) -> None:
        self._registry: Dict[str, Callable[..., Any]] = {}

    def register(self, name: str) -> Callable[[Callable[..., T]], Callable[..., T]]:
        def decorator(factory: Callable[..., T]) -> Callable[..., T]:
            if name in self._registry:
                raise ValueError(f"Tagger backend '{name}' already registered.")
            self._registry[name] = factory
            return factory

        return decorator

    def get(self, name: str) -> Callable[..., Any]:
        try:
            return self._registry[name]
        except KeyError as exc:
            raise KeyError(
                f"Unknown tagger backend '{name}'. Registered backends: {sorted(self._registry)}"
            ) from exc

    def available(self) -> Dict[str, Callable[..., Any]]:
        return dict(self._registry)


taggers = TaggerRegistry()
