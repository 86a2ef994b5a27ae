# src/scivec/config/schema.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Tuple, Union

from .loader import ConfigError

Validator = Callable[[Any], None]

__all__ = ["KeySpec", "make_choices_validator", "validate_section"]


@dataclass
class KeySpec:
	"""
	Specification for a configuration key used during validation.

	:param expected_type: Allowed type (or tuple of types) for the value, e.g.
	                      ``(str, type(None))`` to allow ``None``.
	:param required: Whether the key must be present in the section.
	:param default: Value used when the key is absent and not required.
	:param validator: Optional callable that raises on invalid content.
	"""
	expected_type: Union[type, Tuple[type, ...]]
	required: bool = False
	default: Any = None
	validator: Optional[Validator] = None

	def __post_init__(self) -> None:
		if self.validator is not None and not callable(self.validator):
			raise TypeError("KeySpec.validator must be callable or None")


def make_choices_validator(choices: Iterable[Any], *, casefold: bool = False) -> Validator:
	"""
	Build a validator that ensures the value is one of the allowed *choices*.

	:param choices: Allowed values (compared using equality).
	:param casefold: Compare strings case-insensitively.
	:return: A callable that raises ``ValueError`` if the value is not allowed.
	"""
	allowed = {c.upper() if casefold and isinstance(c, str) else c for c in choices}

	def _validator(value: Any) -> None:
		probe = value.upper() if casefold and isinstance(value, str) else value
		if probe not in allowed:
			raise ValueError(f"value {value!r} not in allowed set {sorted(allowed, key=repr)!r}")

	return _validator


def validate_section(
		name: str,
		values: Mapping[str, Any],
		specs: Mapping[str, KeySpec],
		*,
		allow_unknown: bool = False
) -> Dict[str, Any]:
	"""
	Check one section against its key specs and fill in defaults.

	:param name: Section name (for messages).
	:param values: Parsed section content.
	:param specs: Expected keys.
	:param allow_unknown: Keep keys without a spec instead of rejecting them.
	:return: New mapping with every spec'd key present.
	:raises ConfigError: On missing required keys, unknown keys, wrong types or
	                     values rejected by a validator.
	"""
	unknown = sorted(set(values) - set(specs))
	if unknown and not allow_unknown:
		raise ConfigError(f"[{name}] unknown key(s): {', '.join(unknown)}")

	out: Dict[str, Any] = dict(values)
	for key, spec in specs.items():
		if key not in values:
			if spec.required:
				raise ConfigError(f"[{name}] missing required key '{key}'")
			out[key] = spec.default
			continue
		value = values[key]
		if not isinstance(value, spec.expected_type):
			raise ConfigError(
				f"[{name}] key '{key}' expected {spec.expected_type}, got {type(value).__name__}"
			)
		if spec.validator is not None:
			try:
				spec.validator(value)
			except ValueError as exc:
				raise ConfigError(f"[{name}] key '{key}': {exc}") from exc
	return out
