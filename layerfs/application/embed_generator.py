"""Generator for embedded filesystem modules.

Source files declare embedded filesystems by importing a name from the
generated module and putting ``layerfs:embed`` directives in the comment
lines right above the import::

    # layerfs:embed /assets/*.txt
    # layerfs:embed /templates/**/*.html
    from mypkg._embedded_data import assets

The generator scans the sources, globs every pattern below the package
root, and writes ``mypkg/_embedded_data.py`` holding one ``EmbeddedFS`` per
declared name.
"""
import os
import posixpath
import re
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

from layerfs.core.exceptions import EmbedConfigurationError, SecurityViolationError
from layerfs.infrastructure.filesystem.path_security import secure_path
from layerfs.infrastructure.logging import get_logger

logger = get_logger(__name__)

DIRECTIVE = re.compile(r"^\s*#\s*layerfs:embed\s+(\S.*?)\s*$")


@dataclass
class EmbedDeclaration:
    """One embedded filesystem requested by the sources"""
    name: str
    source_file: Path
    patterns: List[str] = field(default_factory=list)


class EmbedGenerator:
    """Scans sources for embed directives and writes the embedded data module."""

    def __init__(
        self,
        package: str,
        root_dir: Path,
        source_dir: Optional[Path] = None,
        module_name: str = "_embedded_data",
        ignore_files: Optional[List[str]] = None,
    ):
        """
        Initialize generator.

        Args:
            package: Dotted name of the package receiving the module
            root_dir: Package root; embed patterns are relative to it
            source_dir: Directory holding the package sources, root_dir by default
            module_name: Name of the generated module
            ignore_files: Ignore files, relative to root_dir, to register the module in
        """
        if not package or not all(part.isidentifier() for part in package.split(".")):
            raise EmbedConfigurationError(f"Invalid package name: '{package}'")
        if not module_name.isidentifier():
            raise EmbedConfigurationError(f"Invalid module name: '{module_name}'")

        self.package = package
        self.root_dir = Path(root_dir).resolve()
        self.source_dir = Path(source_dir).resolve() if source_dir else self.root_dir
        self.module_name = module_name
        self.ignore_files = ignore_files if ignore_files is not None else [".gitignore", ".hgignore"]

        module = re.escape(f"{package}.{module_name}")
        self._usage = re.compile(
            rf"(?:from\s+{module}\s+import\s+(\w+)|\b{module}\.(\w+))"
        )

    def output_path(self) -> Path:
        return self.source_dir.joinpath(*self.package.split(".")) / f"{self.module_name}.py"

    def scan(self) -> List[EmbedDeclaration]:
        """
        Find all embed declarations in the sources.

        Returns:
            Declarations in source order

        Raises:
            EmbedConfigurationError: If a name is declared twice
        """
        declarations: List[EmbedDeclaration] = []
        seen: Dict[str, Path] = {}
        output = self.output_path()

        for source_file in sorted(self.source_dir.rglob("*.py")):
            if source_file == output:
                continue

            logger.debug("embed_scanning", source_file=str(source_file))
            lines = source_file.read_text(encoding="utf-8").splitlines()

            for lineno, line in enumerate(lines):
                match = self._usage.search(line)
                if not match:
                    continue

                name = match.group(1) or match.group(2)
                if name in seen:
                    raise EmbedConfigurationError(
                        f"Cannot use the name '{name}' twice "
                        f"({seen[name]} and {source_file})"
                    )
                seen[name] = source_file

                declaration = EmbedDeclaration(name=name, source_file=source_file)

                # directives sit directly above the usage, closest first
                for previous in reversed(lines[:lineno]):
                    directive = DIRECTIVE.match(previous)
                    if not directive:
                        break
                    declaration.patterns.append(directive.group(1))

                logger.info(
                    "embed_declaration_found",
                    name=name,
                    patterns=declaration.patterns,
                    source_file=str(source_file),
                )
                declarations.append(declaration)

        return declarations

    def collect(self, declaration: EmbedDeclaration) -> Dict[str, Optional[Path]]:
        """
        Resolve the patterns of a declaration to embedded paths.

        Args:
            declaration: Declaration to resolve

        Returns:
            Mapping of virtual path to host file, or None for directory markers

        Raises:
            EmbedConfigurationError: If a pattern is not rooted or leaves root_dir
        """
        files: Dict[str, Optional[Path]] = {}

        for pattern in declaration.patterns:
            if not pattern.startswith("/"):
                raise EmbedConfigurationError(
                    f"Embed pattern must start with '/': '{pattern}'"
                )

            try:
                resolved = secure_path(str(self.root_dir), pattern, pathmod=os.path)
            except SecurityViolationError as e:
                raise EmbedConfigurationError(
                    f"Tried to embed files outside of the package root: '{pattern}'"
                ) from e

            relative = Path(resolved).relative_to(self.root_dir).as_posix()
            if relative == ".":
                raise EmbedConfigurationError(f"Embed pattern names no files: '{pattern}'")

            # a bare trailing "**" only matches directories before Python 3.13
            if relative == "**" or relative.endswith("/**"):
                relative += "/*"

            for match in sorted(self.root_dir.glob(relative)):
                if not match.is_file():
                    continue

                virtual = "/" + match.relative_to(self.root_dir).as_posix()
                logger.info("embed_include", file=str(match), path=virtual)

                parent = posixpath.dirname(virtual)
                while parent != "/":
                    files.setdefault(parent, None)
                    parent = posixpath.dirname(parent)
                files[virtual] = match

        return files

    def render(self, timestamp: Optional[str] = None) -> str:
        """Render the source code of the embedded data module."""
        timestamp = timestamp or datetime.now().isoformat(timespec="seconds")

        code = [
            f'"""Embedded filesystems for {self.package}.',
            "",
            f"Generated by layerfs embed at {timestamp}; do not edit.",
            '"""',
            "",
            "from layerfs import EmbeddedFS, EmbeddedFsEntry, FileKind",
            "",
        ]

        for declaration in self.scan():
            code.append("")
            code.append(f"{declaration.name} = EmbeddedFS({{")
            for path, source in self.collect(declaration).items():
                if source is None:
                    entry = "EmbeddedFsEntry(None, FileKind.DIR, -1)"
                else:
                    content = source.read_bytes()
                    entry = f"EmbeddedFsEntry({content!r}, FileKind.FILE, {len(content)})"
                code.append(f"    {path!r}: {entry},")
            code.append("})")
            code.append("")

        return "\n".join(code)

    def generate(self, timestamp: Optional[str] = None) -> Path:
        """
        Write the embedded data module and register it in the ignore files.

        Returns:
            Path of the written module

        Raises:
            EmbedConfigurationError: If the output directory is missing
        """
        output = self.output_path()
        output_dir = output.parent

        if not output_dir.exists():
            raise EmbedConfigurationError(f"Output directory doesn't exist: {output_dir}")
        if not output_dir.is_dir():
            raise EmbedConfigurationError(f"Output directory isn't a directory: {output_dir}")

        output.write_text(self.render(timestamp), encoding="utf-8")
        logger.info("embed_module_written", output=str(output))

        try:
            relative = output.relative_to(self.root_dir).as_posix()
        except ValueError:
            relative = None

        if relative is not None:
            for ignore_file in self.ignore_files:
                add_to_ignore_file(self.root_dir / ignore_file, relative)

        return output


def add_to_ignore_file(ignore_file: Path, path: str) -> bool:
    """
    Append ``path`` to an existing ignore file unless it is listed already.

    Returns:
        True if the file was changed
    """
    if not ignore_file.is_file():
        return False

    content = ignore_file.read_text(encoding="utf-8")
    if path in content.splitlines():
        return False

    with open(ignore_file, "a", encoding="utf-8") as f:
        if content and not content.endswith("\n"):
            f.write("\n")
        f.write(f"{path}\n")

    logger.info("ignore_file_updated", ignore_file=str(ignore_file), path=path)
    return True

