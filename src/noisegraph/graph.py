"""Module graph arena and structural validation."""

from typing import Optional

import structlog

from .exceptions import GraphValidationError, InvalidParameterError
from .modules.base import Module

logger = structlog.get_logger()


class ValidationResult:
    """Result of module graph validation."""

    def __init__(self) -> None:
        self.errors: list[str] = []
        self.warnings: list[str] = []
        self.passed = True

    def add_error(self, message: str) -> None:
        """Add validation error."""
        self.errors.append(message)
        self.passed = False

    def add_warning(self, message: str) -> None:
        """Add validation warning."""
        self.warnings.append(message)


def _label(module: Module, names: dict[int, str]) -> str:
    name = names.get(id(module))
    return f"{type(module).__name__} '{name}'" if name else type(module).__name__


def validate_graph(
    root: Module,
    names: Optional[dict[int, str]] = None,
) -> ValidationResult:
    """Check every module reachable from root before evaluation.

    Reports unwired source slots, cycles and per-module parameter
    problems. Structural problems are collected, never raised.

    Args:
        root: Module the graph is evaluated from.
        names: Optional map of ``id(module)`` to a display name.

    Returns:
        ValidationResult with any errors/warnings.
    """
    result = ValidationResult()
    names = names or {}

    done: set[int] = set()
    path: list[Module] = []
    on_path: set[int] = set()

    def visit(module: Module) -> None:
        key = id(module)
        if key in on_path:
            start = next(i for i, m in enumerate(path) if id(m) == key)
            cycle = [_label(m, names) for m in path[start:]] + [_label(module, names)]
            result.add_error(f"Cycle detected: {' -> '.join(cycle)}")
            return
        if key in done:
            return

        path.append(module)
        on_path.add(key)

        for problem in module.parameter_errors():
            result.add_error(f"{_label(module, names)}: {problem}")

        for index, source in enumerate(module.sources):
            if source is None:
                result.add_error(
                    f"{_label(module, names)}: source slot {index} is not connected"
                )
            else:
                visit(source)

        on_path.discard(key)
        path.pop()
        done.add(key)

    visit(root)

    if result.passed:
        logger.debug("graph_validated", root=_label(root, names), modules=len(done))
    else:
        logger.warning(
            "graph_validation_failed",
            root=_label(root, names),
            errors=result.errors,
        )
    return result


def _reachable(root: Module) -> list[Module]:
    """Every module reachable from root, root included."""
    seen: dict[int, Module] = {}
    stack = [root]
    while stack:
        module = stack.pop()
        if id(module) in seen:
            continue
        seen[id(module)] = module
        stack.extend(source for source in module.sources if source is not None)
    return list(seen.values())


class ModuleGraph:
    """Owns a set of modules and refers to them by integer handles.

    ``get_value`` validates a root (wiring, cycles, parameters) before its
    first evaluation. The revision of every module reachable from the root
    is recorded, and the root is validated again once any of them changes,
    whether through ``connect`` or directly on the module.
    """

    def __init__(self) -> None:
        self._modules: list[Module] = []
        self._handles: dict[str, int] = {}
        self._names: dict[int, str] = {}
        self._validated: dict[int, list[tuple[Module, int]]] = {}

    def __len__(self) -> int:
        return len(self._modules)

    def add(self, module: Module, name: Optional[str] = None) -> int:
        """Take ownership of a module and return its handle.

        Raises:
            InvalidParameterError: If module is not a Module or the name is
                already used.
        """
        if not isinstance(module, Module):
            raise InvalidParameterError(
                f"Expected Module, got {type(module).__name__}"
            )
        if name is not None:
            if name in self._handles:
                raise InvalidParameterError(f"Module name '{name}' already in use")
            self._handles[name] = len(self._modules)
            self._names[id(module)] = name
        self._modules.append(module)
        return len(self._modules) - 1

    def module(self, handle: int) -> Module:
        """Return the module behind a handle.

        Raises:
            InvalidParameterError: If the handle is unknown.
        """
        if not 0 <= handle < len(self._modules):
            raise InvalidParameterError(f"Unknown module handle {handle}")
        return self._modules[handle]

    def handle(self, name: str) -> int:
        """Return the handle registered under a name.

        Raises:
            InvalidParameterError: If no module has that name.
        """
        try:
            return self._handles[name]
        except KeyError:
            raise InvalidParameterError(f"No module named '{name}'") from None

    def connect(self, target: int, index: int, source: int) -> None:
        """Wire the source module into a slot of the target module."""
        self.module(target).set_source(index, self.module(source))

    def validate(self, root: int) -> ValidationResult:
        """Validate everything reachable from a root handle."""
        module = self.module(root)
        result = validate_graph(module, self._names)
        if result.passed:
            self._validated[root] = [(m, m.revision) for m in _reachable(module)]
        else:
            self._validated.pop(root, None)
        return result

    def _is_current(self, root: int) -> bool:
        snapshot = self._validated.get(root)
        if snapshot is None:
            return False
        return all(module.revision == revision for module, revision in snapshot)

    def get_value(self, root: int, x: float, y: float, z: float) -> float:
        """Evaluate a root module, validating the graph first if needed.

        Raises:
            GraphValidationError: If the graph below root is invalid.
        """
        if not self._is_current(root):
            result = self.validate(root)
            if not result.passed:
                raise GraphValidationError(result.errors)
        return self._modules[root].get_value(x, y, z)
