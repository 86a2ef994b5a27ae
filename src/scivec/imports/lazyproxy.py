# src/scivec/imports/lazyproxy.py

from __future__ import annotations

import importlib
from types import ModuleType
from typing import Any, Optional

__all__ = ["LazyModule", "lazy_module"]


class LazyModule:
	"""
	Proxy for an optional dependency, imported on first attribute access.

	The core vector/matrix/statistics code never touches these proxies; only the
	array interop helpers do, so numpy and pandas stay optional.
	"""
	def __init__(
			self,
			name: str,
			*,
			install: Optional[str] = None,
			reason: Optional[str] = None
	) -> None:
		self._name = name
		self._mod: Optional[ModuleType] = None
		self._install = install
		self._reason = reason

	@property
	def available(self) -> bool:
		"""True when the module can be imported (triggers the import)."""
		try:
			self._load()
		except ImportError:
			return False
		return True

	def _load(self) -> ModuleType:
		if self._mod is None:
			try:
				self._mod = importlib.import_module(self._name)
			except ImportError as exc:
				parts = [f"Optional dependency '{self._name}' is not installed."]
				if self._reason:
					parts.append(f"It is needed for {self._reason}.")
				if self._install:
					parts.append(f"Install with '{self._install}'.")
				raise ImportError(" ".join(parts)) from exc
		return self._mod

	def __getattr__(self, item: str) -> Any:
		if item.startswith("__"):
			raise AttributeError(item)
		return getattr(self._load(), item)

	def __repr__(self) -> str:
		state = "not loaded" if self._mod is None else "loaded"
		return f"<LazyModule {self._name!r} {state}>"


def lazy_module(
		name: str, *, install: Optional[str] = None, reason: Optional[str] = None
) -> LazyModule:
	"""
	Create a lazy module proxy.

	:param name: Fully qualified module name.
	:param install: Optional installation hint for the ImportError message.
	:param reason: Optional note on what the dependency is used for.
	:return: :class:`LazyModule` instance.
	"""
	return LazyModule(name, install=install, reason=reason)
