"""Import scanning with the ast module."""

import ast
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional

from ..core.exceptions import ArchitectureError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImportRecord:
    """One imported module name, as written or resolved from a relative import."""

    module: str
    imported: str
    lineno: int


@dataclass(frozen=True)
class SourceModule:
    """A Python source file and its dotted module name."""

    name: str
    path: Path
    is_package: bool


def module_name_for(path: Path, root: Path, package_name: str) -> str:
    """Dotted module name of path inside the package rooted at root."""
    relative = path.relative_to(root).with_suffix("")
    parts = [package_name, *relative.parts]
    if parts[-1] == "__init__":
        parts.pop()
    return ".".join(parts)


def iter_source_modules(root: Path, package_name: Optional[str] = None) -> Iterator[SourceModule]:
    """Yield every .py file under root, sorted by path."""
    package_name = package_name or Path(root).resolve().name
    for path in sorted(root.rglob("*.py")):
        if "__pycache__" in path.parts:
            continue
        yield SourceModule(
            name=module_name_for(path, root, package_name),
            path=path,
            is_package=path.name == "__init__.py",
        )


def resolve_relative(module: SourceModule, level: int, target: Optional[str]) -> str:
    """Resolve ``from <dots><target>`` relative to module.

    Raises:
        ArchitectureError: If the import climbs above the top-level package
    """
    package_parts = module.name.split(".")
    if not module.is_package:
        package_parts = package_parts[:-1]

    climb = level - 1
    if climb >= len(package_parts):
        raise ArchitectureError(
            f"Relative import beyond top-level package in {module.name}",
            details={"module": module.name, "path": str(module.path), "level": level},
        )

    base = package_parts[:len(package_parts) - climb]
    if target:
        base.append(target)
    return ".".join(base)


class ImportScanner:
    """Collect the imports of Python source files."""

    def scan_source(self, module: SourceModule, source: str) -> List[ImportRecord]:
        """Return the imports in source, relative ones resolved.

        Raises:
            ArchitectureError: If source is not valid Python
        """
        try:
            tree = ast.parse(source, filename=str(module.path))
        except SyntaxError as e:
            raise ArchitectureError(
                f"Cannot parse {module.path}: {e.msg}",
                details={"path": str(module.path), "lineno": e.lineno},
            )

        records: List[ImportRecord] = []
        for node in ast.walk(tree):
            if isinstance(node, ast.Import):
                for alias in node.names:
                    records.append(ImportRecord(module.name, alias.name, node.lineno))
            elif isinstance(node, ast.ImportFrom):
                if node.level:
                    base = resolve_relative(module, node.level, node.module)
                else:
                    base = node.module or ""
                if node.module is None:
                    # from . import a, b
                    for alias in node.names:
                        records.append(ImportRecord(module.name, f"{base}.{alias.name}", node.lineno))
                else:
                    records.append(ImportRecord(module.name, base, node.lineno))

        records.sort(key=lambda record: (record.lineno, record.imported))
        return records

    def scan_module(self, module: SourceModule) -> List[ImportRecord]:
        try:
            source = module.path.read_text(encoding="utf-8")
        except OSError as e:
            raise ArchitectureError(
                f"Cannot read {module.path}: {e}",
                details={"path": str(module.path)},
            )
        return self.scan_source(module, source)

    def scan_package(self, root: Path, package_name: Optional[str] = None) -> List[ImportRecord]:
        """Scan every module under root."""
        records: List[ImportRecord] = []
        for module in iter_source_modules(root, package_name):
            records.extend(self.scan_module(module))
        logger.debug("Scanned %d imports under %s", len(records), root)
        return records
