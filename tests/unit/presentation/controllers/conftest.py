from __future__ import annotations

from typing import Any, Dict, List, Tuple

import pytest


class RecordingUseCase:
    """Use case double: every awaited method is recorded and answered.

    ``returns`` maps a method name to its result; ``raises`` maps a method
    name to the error it raises.
    """

    def __init__(self) -> None:
        self.calls: List[Tuple[str, Tuple[Any, ...]]] = []
        self.returns: Dict[str, Any] = {}
        self.raises: Dict[str, Exception] = {}

    def __getattr__(self, name: str):
        if name.startswith("_"):
            raise AttributeError(name)

        async def method(*args: Any) -> Any:
            self.calls.append((name, args))
            if name in self.raises:
                raise self.raises[name]
            return self.returns.get(name, True)

        return method


@pytest.fixture()
def use_case() -> RecordingUseCase:
    return RecordingUseCase()
