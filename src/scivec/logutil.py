# src/scivec/logutil.py

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Literal, Optional, Union

PathLike = Union[str, Path]

PACKAGE_LOGGER = "scivec"

ConsoleLevelName = Literal[
	"CRITICAL",
	"ERROR",
	"WARNING",
	"INFO",
	"DEBUG",
	"NOTSET",
]

LevelLike = Union[int, ConsoleLevelName]

_DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def normalize_level(value: LevelLike, *, param_name: str = "level") -> int:
	"""
	Resolve a level given as ``int`` or as a level name (case-insensitive).

	:param value: Level number or name such as ``"debug"``.
	:param param_name: Parameter label used in the error message.
	:return: Numeric logging level.
	:raises ValueError: If the name is not a known logging level.
	"""
	if isinstance(value, int):
		return value

	resolved = logging.getLevelName(str(value).upper())
	if isinstance(resolved, int):
		return resolved

	raise ValueError(f"Unknown logging level name for {param_name}: {value}")


def get_logger(name: str = PACKAGE_LOGGER) -> logging.Logger:
	"""
	Return a logger inside the ``scivec`` hierarchy.

	The package root logger receives one console handler the first time it is
	requested; module loggers carry no handlers and propagate to it.

	:param name: Logger name (usually ``__name__``).
	:return: The logger.
	"""
	root = logging.getLogger(PACKAGE_LOGGER)
	if not root.handlers:
		handler = logging.StreamHandler()
		handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
		root.addHandler(handler)
		root.setLevel(logging.INFO)
	return logging.getLogger(name)


def configure_logging(
		*,
		console_level: LevelLike = "INFO",
		file_path: Optional[PathLike] = None,
		file_level: Optional[LevelLike] = None,
		mode: str = "a",
		rotate: bool = False,
		max_bytes: int = 1_000_000,
		backup_count: int = 3,
		formatter: Optional[logging.Formatter] = None,
		propagate: bool = True
) -> logging.Logger:
	"""
	Configure the package logger shared by every ``scivec`` module.

	Numeric routines only emit DEBUG records (length truncation, NaN found while
	sorting, counts that cannot be converted), so ``console_level="DEBUG"`` is
	the switch for tracing them.

	:param console_level: Console handler level.
	:param file_path: Optional log file path to add a file handler.
	:param file_level: File handler level (defaults to the console level).
	:param mode: 'w' for overwriting or 'a' for appending.
	:param rotate: Use RotatingFileHandler when True.
	:param max_bytes: Rotation threshold per file.
	:param backup_count: Number of rotated backups.
	:param formatter: Custom formatter; default includes timestamp.
	:param propagate: Whether records also reach the root logger.
	:return: The configured package logger.
	"""
	console_value = normalize_level(console_level, param_name="console_level")
	file_value = (
		normalize_level(file_level, param_name="file_level")
		if file_level is not None
		else console_value
	)

	log = get_logger(PACKAGE_LOGGER)
	log.setLevel(min(console_value, file_value) if file_path else console_value)
	log.propagate = propagate

	fmt = formatter or logging.Formatter(_DEFAULT_FORMAT)

	for handler in log.handlers:
		# FileHandler subclasses StreamHandler; only touch the console one
		if type(handler) is logging.StreamHandler:
			handler.setLevel(console_value)
			handler.setFormatter(fmt)

	if file_path:
		path = Path(file_path)
		existing = [h for h in log.handlers if getattr(h, "baseFilename", None) == os.path.abspath(path)]
		if existing:
			for handler in existing:
				handler.setLevel(file_value)
				handler.setFormatter(fmt)
			return log
		path.parent.mkdir(parents=True, exist_ok=True)
		file_handler: logging.Handler
		if rotate:
			file_handler = RotatingFileHandler(
				path,
				mode=mode,
				maxBytes=max_bytes,
				backupCount=backup_count,
				encoding="utf-8"
			)
		else:
			file_handler = logging.FileHandler(path, mode=mode, encoding="utf-8")
		file_handler.setLevel(file_value)
		file_handler.setFormatter(fmt)
		log.addHandler(file_handler)

	return log
