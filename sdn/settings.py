"""YAML configuration for the SDN observer."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .metadata.local import LocalStatQuery
from .sinks.base import NotificationSink
from .sinks.registry import available_sinks, get_sink


@dataclass
class LoggingConfig:
    level: str = "INFO"
    file: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(logging.getLevelName(str(self.level).upper()), int):
            raise ValueError(f"unknown log level '{self.level}'")

    @property
    def level_number(self) -> int:
        return logging.getLevelName(self.level.upper())


@dataclass
class SinkConfig:
    type: str = "log"
    url: Optional[str] = None
    timeout: float = 5.0


@dataclass
class MetadataConfig:
    root: Optional[str] = None


@dataclass
class SdnConfig:
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    sink: SinkConfig = field(default_factory=SinkConfig)
    metadata: MetadataConfig = field(default_factory=MetadataConfig)


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = data.get(name) or {}
    if not isinstance(value, dict):
        raise ValueError(f"configuration section '{name}' must be a mapping")
    return value


def load_config(path: str | Path | None) -> SdnConfig:
    if path is None:
        return SdnConfig()
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(path)
    with config_path.open("r", encoding="utf-8") as fh:
        try:
            data = yaml.safe_load(fh) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"invalid SDN configuration: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError("SDN configuration must be a mapping")

    try:
        logging_cfg = LoggingConfig(**_section(data, "logging"))
        sink_cfg = SinkConfig(**_section(data, "sink"))
        metadata_cfg = MetadataConfig(**_section(data, "metadata"))
    except TypeError as exc:
        raise ValueError(f"invalid SDN configuration: {exc}") from exc

    if sink_cfg.type not in available_sinks():
        raise ValueError(f"Unsupported sink type {sink_cfg.type}")
    if sink_cfg.type == "http" and not sink_cfg.url:
        raise ValueError("The http sink requires a url")
    return SdnConfig(logging=logging_cfg, sink=sink_cfg, metadata=metadata_cfg)


def build_sink(config: SdnConfig, *, logger: Optional[logging.Logger] = None) -> NotificationSink:
    if config.sink.type == "http":
        return get_sink("http", url=config.sink.url, timeout=config.sink.timeout)
    if config.sink.type == "log":
        return get_sink("log", logger=logger)
    return get_sink(config.sink.type)


def build_metadata_query(config: SdnConfig) -> LocalStatQuery:
    root = Path(config.metadata.root) if config.metadata.root else None
    return LocalStatQuery(root=root)


__all__ = [
    "LoggingConfig",
    "MetadataConfig",
    "SdnConfig",
    "SinkConfig",
    "build_metadata_query",
    "build_sink",
    "load_config",
]
