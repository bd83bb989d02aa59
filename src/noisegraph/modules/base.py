"""Base contract shared by every noise module."""

from abc import ABC, abstractmethod
from typing import ClassVar, Optional

from ..exceptions import InvalidParameterError, MissingSourceModuleError


class Module(ABC):
    """A node in a noise module graph.

    Each concrete module kind has a fixed number of source slots. Slots
    hold references to other modules, which are evaluated recursively by
    ``get_value``. Modules do not check their wiring when evaluated; use
    ``noisegraph.graph.validate_graph`` before the first evaluation if
    that guarantee is needed.
    """

    source_count: ClassVar[int] = 0

    def __init__(self) -> None:
        self._sources: list[Optional["Module"]] = [None] * self.source_count
        self._revision = 0

    @property
    def revision(self) -> int:
        """Bumped whenever wiring or a validated parameter changes."""
        return self._revision

    @property
    def sources(self) -> tuple[Optional["Module"], ...]:
        """Current slot contents, None for unwired slots."""
        return tuple(self._sources)

    def get_source(self, index: int) -> "Module":
        """Return the module wired into a slot.

        Raises:
            InvalidParameterError: If index is outside [0, source_count).
            MissingSourceModuleError: If the slot was never wired.
        """
        self._check_index(index)
        source = self._sources[index]
        if source is None:
            raise MissingSourceModuleError(
                f"{type(self).__name__} has no source module in slot {index}"
            )
        return source

    def set_source(self, index: int, source: "Module") -> None:
        """Wire a module into a slot.

        Raises:
            InvalidParameterError: If index is outside [0, source_count)
                or source is not a Module.
        """
        self._check_index(index)
        if not isinstance(source, Module):
            raise InvalidParameterError(
                f"Expected Module, got {type(source).__name__}"
            )
        self._sources[index] = source
        self._touch()

    def parameter_errors(self) -> list[str]:
        """Problems that would make evaluation meaningless.

        Checked by graph validation; empty for most module kinds.
        """
        return []

    @abstractmethod
    def get_value(self, x: float, y: float, z: float) -> float:
        """Evaluate the module at (x, y, z)."""

    def _touch(self) -> None:
        self._revision += 1

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self.source_count:
            raise InvalidParameterError(
                f"Source index {index} out of range for "
                f"{type(self).__name__} with {self.source_count} sources"
            )

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
