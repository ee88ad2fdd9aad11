"""Layer definitions for the Dependency Rule.

Layers are ranked from the centre outward. A module may import modules of
its own rank or lower; the shared kernel (rank -1) is importable from
everywhere but may only import itself.
"""

from dataclasses import dataclass
from fnmatch import fnmatchcase
from typing import Iterable, List, Optional, Tuple

SHARED_KERNEL_RANK = -1


@dataclass(frozen=True)
class Layer:
    """A named ring of the architecture.

    patterns are fnmatch patterns over dotted module names; ``*`` also
    matches dots.
    """

    name: str
    rank: int
    patterns: Tuple[str, ...]

    def matches(self, module: str) -> bool:
        return any(fnmatchcase(module, pattern) for pattern in self.patterns)


class LayerMap:
    """Ordered collection of layers.

    A module belongs to the first layer with a matching pattern. Modules
    matching no layer (package roots, feature ``__init__`` re-exports) are
    unconstrained.
    """

    def __init__(self, layers: Iterable[Layer]):
        self.layers: List[Layer] = list(layers)

    def __iter__(self):
        return iter(self.layers)

    def __len__(self) -> int:
        return len(self.layers)

    def layer_for(self, module: str) -> Optional[Layer]:
        for layer in self.layers:
            if layer.matches(module):
                return layer
        return None


def _subtree(*modules: str) -> Tuple[str, ...]:
    patterns = []
    for module in modules:
        patterns.extend([module, f"{module}.*"])
    return tuple(patterns)


def default_layer_map(package: str = "clean_arch") -> LayerMap:
    """Layer map for a package laid out like clean_arch.

    Expects ``core``/``utils`` as the shared kernel and feature packages
    under ``features/<name>/`` split into entities, application/services,
    adapters and factories.
    """
    feature = f"{package}.features.*"
    return LayerMap([
        Layer(
            name="shared kernel",
            rank=SHARED_KERNEL_RANK,
            patterns=_subtree(f"{package}.core", f"{package}.utils"),
        ),
        Layer(
            name="entities",
            rank=0,
            patterns=_subtree(f"{feature}.entities"),
        ),
        Layer(
            name="use cases",
            rank=1,
            patterns=_subtree(f"{feature}.application", f"{feature}.services"),
        ),
        Layer(
            name="interface adapters",
            rank=2,
            patterns=_subtree(
                f"{feature}.repositories",
                f"{feature}.publishers",
                f"{feature}.controllers",
            ),
        ),
        Layer(
            name="frameworks and drivers",
            rank=3,
            patterns=_subtree(
                f"{feature}.factories",
                f"{package}.container",
                f"{package}.config",
                f"{package}.cli",
                f"{package}.architecture",
            ),
        ),
    ])


DEFAULT_LAYERS = default_layer_map()
