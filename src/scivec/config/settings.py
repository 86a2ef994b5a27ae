# src/scivec/config/settings.py

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from ..logutil import configure_logging, get_logger
from .loader import ConfigError, PathLike, Sections, load_ini_files, load_json_files, merge_layer
from .schema import KeySpec, make_choices_validator, validate_section

LOG = get_logger(__name__)

__all__ = ["Settings", "SCHEMA", "load_settings"]

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")
_LEVEL_NAME = make_choices_validator(_LEVELS, casefold=True)


def _check_level(value: Any) -> None:
	# numeric levels pass through; names must be known
	if isinstance(value, str):
		_LEVEL_NAME(value)


SCHEMA: Dict[str, Dict[str, KeySpec]] = {
	"logging": {
		"console_level": KeySpec(str, default="INFO", validator=_LEVEL_NAME),
		"file_path": KeySpec((str, type(None))),
		"file_level": KeySpec((str, int, type(None)), validator=_check_level),
		"rotate": KeySpec(bool, default=False),
	},
	"statistics": {
		"median_in_place": KeySpec(bool, default=False),
	},
}

_INI_SUFFIXES = {".ini", ".cfg", ".conf"}


@dataclass(frozen=True)
class Settings:
	"""
	Package settings.

	``[logging]`` feeds :func:`~scivec.logutil.configure_logging`;
	``[statistics] median_in_place`` is the default used by
	:meth:`scivec.stats.Sample.median`.
	"""
	console_level: str = "INFO"
	file_path: Optional[str] = None
	file_level: Optional[Union[str, int]] = None
	rotate: bool = False
	median_in_place: bool = False

	@classmethod
	def from_sections(cls, sections: Mapping[str, Mapping[str, Any]]) -> "Settings":
		"""Validate parsed ``{section: {key: value}}`` data and build settings."""
		unknown = sorted(set(sections) - set(SCHEMA))
		if unknown:
			raise ConfigError(f"Unknown config section(s): {', '.join(unknown)}")
		log_sec = validate_section("logging", sections.get("logging", {}), SCHEMA["logging"])
		stat_sec = validate_section("statistics", sections.get("statistics", {}), SCHEMA["statistics"])
		return cls(
			console_level=log_sec["console_level"].upper(),
			file_path=log_sec["file_path"],
			file_level=log_sec["file_level"],
			rotate=log_sec["rotate"],
			median_in_place=stat_sec["median_in_place"],
		)

	def apply_logging(self) -> logging.Logger:
		"""Configure the package logger from the ``[logging]`` values."""
		return configure_logging(
			console_level=self.console_level,
			file_path=self.file_path,
			file_level=self.file_level,
			rotate=self.rotate,
		)


def load_settings(*paths: PathLike) -> Settings:
	"""
	Read INI (``.ini``/``.cfg``/``.conf``) and JSON files into :class:`Settings`.

	Files are merged in the given order; later files win. With no paths the
	defaults are returned.

	:param paths: Config file paths.
	:return: Validated settings.
	:raises ConfigError: On unreadable files, unsupported suffixes or invalid values.
	"""
	merged: Sections = {}
	for path_like in paths:
		path = Path(path_like)
		suffix = path.suffix.lower()
		if suffix == ".json":
			layer = load_json_files([path])
		elif suffix in _INI_SUFFIXES:
			layer = load_ini_files([path])
		else:
			raise ConfigError(f"Unsupported config file type '{suffix}': {path}")
		merge_layer(merged, layer)

	settings = Settings.from_sections(merged)
	LOG.debug("Settings loaded from %d file(s): %s", len(paths), settings)
	return settings
