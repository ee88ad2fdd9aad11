"""Dependency Rule checker.

Reports every import that points outward, from an inner layer to an outer
one. Imports of modules outside the checked package are ignored.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from ..core.exceptions import ArchitectureError
from .layers import LayerMap, default_layer_map
from .scanner import ImportRecord, ImportScanner

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Violation:
    """An import that breaks the Dependency Rule."""

    module: str
    imported: str
    source_layer: str
    target_layer: str
    lineno: int

    def __str__(self) -> str:
        return (
            f"{self.module}:{self.lineno} imports {self.imported} "
            f"({self.source_layer} -> {self.target_layer})"
        )


def _within(module: str, package_name: str) -> bool:
    return module == package_name or module.startswith(package_name + ".")


class DependencyRuleChecker:
    """Check a package's imports against a layer map."""

    def __init__(self, layer_map: Optional[LayerMap] = None, scanner: Optional[ImportScanner] = None):
        self.layer_map = layer_map
        self.scanner = scanner or ImportScanner()

    def _layers_for(self, package_name: str) -> LayerMap:
        if self.layer_map is not None:
            return self.layer_map
        return default_layer_map(package_name)

    def evaluate(self, records: Iterable[ImportRecord], package_name: str) -> List[Violation]:
        """Return the violations among already scanned imports."""
        layer_map = self._layers_for(package_name)
        violations: List[Violation] = []

        for record in records:
            if not _within(record.imported, package_name):
                continue

            source = layer_map.layer_for(record.module)
            target = layer_map.layer_for(record.imported)
            if source is None or target is None:
                continue

            if target.rank > source.rank:
                violations.append(Violation(
                    module=record.module,
                    imported=record.imported,
                    source_layer=source.name,
                    target_layer=target.name,
                    lineno=record.lineno,
                ))

        violations.sort(key=lambda v: (v.module, v.lineno, v.imported))
        return violations

    def check(self, package_dir: Path, package_name: Optional[str] = None) -> List[Violation]:
        """Scan package_dir and return its violations.

        Args:
            package_dir: Directory of the top-level package
            package_name: Import name of the package, the directory name by default

        Raises:
            ArchitectureError: If the directory is missing or a file cannot be parsed
        """
        package_dir = Path(package_dir).resolve()
        if not package_dir.is_dir():
            raise ArchitectureError(
                f"Package directory not found: {package_dir}",
                details={"path": str(package_dir)},
            )

        package_name = package_name or package_dir.name
        records = self.scanner.scan_package(package_dir, package_name)
        violations = self.evaluate(records, package_name)

        if violations:
            logger.warning("%d Dependency Rule violation(s) in %s", len(violations), package_name)
        else:
            logger.info("No Dependency Rule violations in %s", package_name)
        return violations
