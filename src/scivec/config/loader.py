# src/scivec/config/loader.py

from __future__ import annotations

import ast
import configparser
import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, MutableMapping, Union

from ..logutil import get_logger

LOG = get_logger(__name__)

PathLike = Union[str, Path]

Sections = Dict[str, Dict[str, Any]]

__all__ = ["ConfigError", "parse_value", "merge_layer", "load_ini_files", "load_json_files"]


class ConfigError(Exception):
	"""Configuration file could not be read or does not match its schema."""


def parse_value(raw: str) -> Any:
	"""
	Parse a raw INI string into a typed Python value.

	Tried in order: Python literals via ``ast.literal_eval``, None markers
	(``none``, ``null``), booleans (``true/yes/on``, ``false/no/off``).
	Anything else stays a string.

	:param raw: Source text as read from ConfigParser.
	:return: Best-effort typed value.
	"""
	s = raw.strip()
	try:
		value = ast.literal_eval(s)
	except (ValueError, SyntaxError):
		pass
	else:
		return list(value) if isinstance(value, tuple) else value

	lower = s.lower()
	if lower in {"none", "null"}:
		return None
	if lower in {"true", "yes", "on"}:
		return True
	if lower in {"false", "no", "off"}:
		return False
	return s


def merge_layer(base: MutableMapping[str, Dict[str, Any]], layer: Mapping[str, Mapping[str, Any]]) -> None:
	"""
	Merge *layer* into *base* at the section/key level; *layer* wins on conflicts.

	:param base: Destination mapping (modified in place).
	:param layer: Source mapping to overlay.
	:raises ConfigError: If a section of *layer* is not a mapping.
	"""
	for sec, mapping in layer.items():
		if not isinstance(mapping, Mapping):
			raise ConfigError(f"Section '{sec}' must be a mapping, got {type(mapping).__name__}.")
		base.setdefault(sec, {}).update(mapping)


def _check_exists(paths: List[Path]) -> None:
	missing = [str(p) for p in paths if not p.exists()]
	if missing:
		raise ConfigError(f"Missing config file(s): {', '.join(missing)}")


def load_ini_files(files: Iterable[PathLike]) -> Sections:
	"""
	Load one or more INI files into lowercased ``{section: {key: value}}``.

	Later files override earlier ones. Interpolation is disabled.

	:param files: INI file paths.
	:return: Merged, typed mapping.
	:raises ConfigError: On missing or unreadable files.
	"""
	paths = [Path(p) for p in files]
	_check_exists(paths)

	cp = configparser.ConfigParser(interpolation=None)
	for p in paths:
		try:
			with p.open("r", encoding="utf-8") as fh:
				cp.read_file(fh)
		except (OSError, configparser.Error) as exc:
			raise ConfigError(f"Failed reading '{p}': {exc}") from exc
		LOG.debug("Loaded INI file: %s", p)

	return {
		section.lower(): {key.lower(): parse_value(value) for key, value in cp.items(section)}
		for section in cp.sections()
	}


def load_json_files(files: Iterable[PathLike]) -> Sections:
	"""
	Load and merge JSON files shaped ``{"section": {"key": value}}``.

	:param files: JSON file paths; later files override earlier ones.
	:return: Merged mapping with lowercased section/key names.
	:raises ConfigError: On missing/unreadable files or a wrong top-level shape.
	"""
	paths = [Path(p) for p in files]
	_check_exists(paths)

	merged: Sections = {}
	for p in paths:
		try:
			with p.open("r", encoding="utf-8") as fh:
				obj = json.load(fh)
		except (OSError, ValueError) as exc:
			raise ConfigError(f"Failed reading JSON '{p}': {exc}") from exc

		if not isinstance(obj, dict):
			raise ConfigError(f"Top-level JSON in '{p}' must be an object.")

		lowered: Sections = {}
		for sec, mapping in obj.items():
			if not isinstance(mapping, dict):
				raise ConfigError(f"Section '{sec}' in '{p}' must be an object.")
			lowered[sec.lower()] = {str(k).lower(): v for k, v in mapping.items()}
		merge_layer(merged, lowered)
		LOG.debug("Merged JSON file: %s", p)
	return merged
