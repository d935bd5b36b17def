"""Reading and writing netplan YAML documents."""

import hashlib
import io
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Set, Tuple, Union

from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.constructor import RoundTripConstructor, SafeConstructor
from ruamel.yaml.error import YAMLError

from netplan_types.models.network import NetplanConfig


logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class NetplanLoadError(Exception):
    """A netplan document could not be loaded."""

    def __init__(self, source: PathLike, errors: Iterable[Tuple[str, str]]):
        self.source = str(source)
        self.errors: List[Tuple[str, str]] = list(errors)
        details = "; ".join(f"{loc}: {msg}" if loc else msg for loc, msg in self.errors)
        super().__init__(f"{self.source}: {details}")


class _NetplanConstructor(RoundTripConstructor):
    """Round-trip constructor that loads every boolean as a plain bool."""


# Anchored booleans otherwise load as ScalarBoolean, an int subclass
_NetplanConstructor.add_constructor("tag:yaml.org,2002:bool", SafeConstructor.construct_yaml_bool)


def _yaml() -> YAML:
    """Round-trip YAML 1.2 handler with netplan style indentation."""
    yaml = YAML()
    yaml.Constructor = _NetplanConstructor
    yaml.default_flow_style = False
    yaml.indent(mapping=2, sequence=4, offset=2)
    return yaml


def _location(loc: Tuple) -> str:
    return ".".join(str(part) for part in loc)


def parse_netplan(text: str, source: PathLike = "<string>") -> NetplanConfig:
    """Parse a netplan document.

    Raises NetplanLoadError if the text is not YAML, is not a mapping, or does
    not match the schema. A single bad field fails the whole document.
    """
    try:
        data = _yaml().load(text)
    except YAMLError as e:
        raise NetplanLoadError(source, [("", f"invalid YAML: {e}")]) from e

    if data is None:
        raise NetplanLoadError(source, [("", "empty document")])
    if not isinstance(data, dict):
        raise NetplanLoadError(source, [("", "expected a mapping at the top level")])

    try:
        return NetplanConfig.model_validate(data)
    except ValidationError as e:
        errors = [(_location(err["loc"]), err["msg"]) for err in e.errors()]
        raise NetplanLoadError(source, errors) from e


def render_netplan(config: NetplanConfig) -> str:
    """Render a netplan document as YAML."""
    stream = io.StringIO()
    _yaml().dump(config.to_dict(), stream)
    return stream.getvalue()


class NetplanLoader:
    """Loads netplan files and tracks them for changes."""

    def __init__(self, config_dir: Optional[PathLike] = None):
        """Initialize the loader."""
        self.config_dir = Path(config_dir) if config_dir is not None else None
        self.configs: Dict[str, NetplanConfig] = {}
        self.errors: Dict[str, NetplanLoadError] = {}
        self._config_hashes: Dict[str, str] = {}
        self._directories: Set[Path] = set()

    def load_file(self, path: PathLike) -> NetplanConfig:
        """Load a single netplan file."""
        path = Path(path)
        content = self._read(path)
        config = parse_netplan(content, source=path)
        self.configs[str(path)] = config
        self.errors.pop(str(path), None)
        logger.debug(f"Loaded netplan file: {path}")
        return config

    def load_directory(self, directory: Optional[PathLike] = None) -> Dict[str, NetplanConfig]:
        """Load every ``*.yaml`` file of a directory in lexical order.

        Files that fail to load are logged, recorded in ``errors`` and skipped.
        """
        directory = Path(directory) if directory is not None else self.config_dir
        if directory is None:
            raise ValueError("No netplan directory given")
        if not directory.is_dir():
            raise FileNotFoundError(f"Netplan directory not found: {directory}")

        self._directories.add(directory)
        logger.info(f"Loading netplan files from {directory}")
        loaded: Dict[str, NetplanConfig] = {}
        failed = 0
        for yaml_file in sorted(directory.glob("*.yaml")):
            try:
                loaded[str(yaml_file)] = self.load_file(yaml_file)
            except NetplanLoadError as e:
                logger.error(f"Error loading {yaml_file}: {e}")
                self.errors[str(yaml_file)] = e
                failed += 1

        logger.info(f"Loaded {len(loaded)} netplan file(s), {failed} failed")
        return loaded

    def dump_file(self, config: NetplanConfig, path: PathLike):
        """Write a netplan document to a file."""
        path = Path(path)
        content = render_netplan(config)
        path.write_text(content)
        self._config_hashes[str(path)] = hashlib.md5(content.encode()).hexdigest()
        logger.debug(f"Wrote netplan file: {path}")

    def get(self, path: PathLike) -> Optional[NetplanConfig]:
        """Get a loaded configuration by file path."""
        return self.configs.get(str(path))

    def has_changed(self) -> bool:
        """Check if tracked files changed, or new files appeared, since loading."""
        for name, known_hash in self._config_hashes.items():
            path = Path(name)
            if not path.exists():
                return True
            if hashlib.md5(path.read_text().encode()).hexdigest() != known_hash:
                return True

        directories = set(self._directories)
        if self.config_dir is not None:
            directories.add(self.config_dir)
        for directory in directories:
            if not directory.is_dir():
                continue
            for yaml_file in directory.glob("*.yaml"):
                if str(yaml_file) not in self._config_hashes:
                    return True

        return False

    def _read(self, path: Path) -> str:
        """Read a file and remember its hash."""
        try:
            content = path.read_text()
        except OSError as e:
            raise NetplanLoadError(path, [("", f"cannot read file: {e}")]) from e
        self._config_hashes[str(path)] = hashlib.md5(content.encode()).hexdigest()
        return content
