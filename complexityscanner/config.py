"""
Configuration system for the complexity scanner.

Supports YAML and JSON configuration files for choosing the parser,
tuning note thresholds and score weights, and output options.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from complexityscanner.analysis.aggregate import ScoreWeights
from complexityscanner.analysis.complexity import NoteThresholds
from complexityscanner.core.errors import ConfigError
from complexityscanner.parsers.base import ParseOptions


# Default configuration file names to search for
CONFIG_FILE_NAMES = [
    ".complexityscanner.yaml",
    ".complexityscanner.yml",
    ".complexityscanner.json",
    "complexityscanner.yaml",
    "complexityscanner.yml",
    "complexityscanner.json",
]

SOURCE_TYPES = ("module", "script")


@dataclass
class ResolverConfig:
    """How local module specifiers are matched against batch files."""
    default_extension: str = ".js"
    index_name: str = "index"


@dataclass
class OutputConfig:
    """Configuration for output formatting."""
    format: str = "text"  # text, json
    output_file: Optional[str] = None
    color: bool = True
    include_ast: bool = False


@dataclass
class AnalysisConfig:
    """
    Main configuration for the analysis engine.

    Example YAML config:

    ```yaml
    analysis:
      parser: esprima        # esprima, tree-sitter
      source_type: module    # module, script
      tolerant: true
      max_workers: 4
      exclude:
        - "vendor/**"

    thresholds:
      high_complexity: 10
      medium_complexity: 5
      long_function: 60
      deep_nesting: 4

    score:
      complexity: 6
      long_function_percentage: 0.4
      diagnostic: 8
      long_function_lines: 40

    resolver:
      default_extension: .js
      index_name: index

    output:
      format: text
      color: true
    ```
    """
    parser: str = "esprima"
    source_type: str = "module"
    tolerant: bool = True
    max_workers: int = 4
    exclude_patterns: List[str] = field(default_factory=lambda: [
        "*.min.js",
        "*.bundle.js",
    ])

    thresholds: NoteThresholds = field(default_factory=NoteThresholds)
    score: ScoreWeights = field(default_factory=ScoreWeights)
    resolver: ResolverConfig = field(default_factory=ResolverConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    def __post_init__(self):
        if self.source_type not in SOURCE_TYPES:
            raise ConfigError(
                f"source_type must be one of {', '.join(SOURCE_TYPES)}, got {self.source_type!r}"
            )
        if self.max_workers < 1:
            raise ConfigError(f"max_workers must be at least 1, got {self.max_workers}")

    def parse_options(self) -> ParseOptions:
        return ParseOptions(module=self.source_type == "module", tolerant=self.tolerant)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to a dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AnalysisConfig":
        """Create config from a dictionary."""
        data = dict(data)

        # Handle nested 'analysis' section
        if isinstance(data.get("analysis"), dict):
            data.update(data.pop("analysis"))
        if "exclude" in data:
            data["exclude_patterns"] = data.pop("exclude")

        nested = {
            "thresholds": NoteThresholds,
            "score": ScoreWeights,
            "resolver": ResolverConfig,
            "output": OutputConfig,
        }
        for key, section_cls in nested.items():
            if isinstance(data.get(key), dict):
                data[key] = _build_section(section_cls, key, data[key])

        # Filter to only known fields
        known_fields = {f.name for f in fields(cls)}
        filtered_data = {k: v for k, v in data.items() if k in known_fields}

        return cls(**filtered_data)


def _build_section(section_cls, key: str, values: Dict[str, Any]):
    known = {f.name for f in fields(section_cls)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise ConfigError(f"Unknown option(s) in '{key}': {', '.join(unknown)}")
    return section_cls(**values)


def load_config(path: str) -> Dict[str, Any]:
    """
    Load configuration from a file.

    Supports YAML and JSON formats.
    """
    config_path = Path(path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    content = config_path.read_text(encoding="utf-8")

    try:
        if config_path.suffix.lower() == ".json":
            data = json.loads(content)
        else:
            data = yaml.safe_load(content) or {}
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigError(f"Invalid configuration file {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Configuration file {path} must contain a mapping")
    return data


def find_config(start_path: str = ".") -> Optional[str]:
    """
    Find a configuration file by searching up the directory tree.

    Returns the path to the first config file found, or None.
    """
    current = Path(start_path).resolve()
    if current.is_file():
        current = current.parent

    while True:
        for name in CONFIG_FILE_NAMES:
            config_path = current / name
            if config_path.exists():
                return str(config_path)
        if current == current.parent:
            return None
        current = current.parent


def load_analysis_config(path: Optional[str] = None, start_dir: str = ".") -> AnalysisConfig:
    """
    Load an AnalysisConfig from a file or create a default one.

    If path is None, searches for a config file starting from start_dir.
    """
    if path is None:
        path = find_config(start_dir)

    if path is None:
        return AnalysisConfig()

    return AnalysisConfig.from_dict(load_config(path))


def create_default_config() -> str:
    """Default configuration file content as YAML."""
    defaults = AnalysisConfig()
    config = {
        "analysis": {
            "parser": defaults.parser,
            "source_type": defaults.source_type,
            "tolerant": defaults.tolerant,
            "max_workers": defaults.max_workers,
            "exclude": defaults.exclude_patterns,
        },
        "thresholds": asdict(defaults.thresholds),
        "score": asdict(defaults.score),
        "resolver": asdict(defaults.resolver),
        "output": {
            "format": defaults.output.format,
            "color": defaults.output.color,
        },
    }
    return yaml.dump(config, default_flow_style=False, sort_keys=False)
