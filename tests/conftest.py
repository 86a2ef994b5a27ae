from __future__ import annotations

import logging

import pytest


@pytest.fixture(autouse=True)
def _restore_package_logger():
	"""Undo handler/level/propagation changes made to the ``scivec`` logger."""
	log = logging.getLogger("scivec")
	handlers, level, propagate = list(log.handlers), log.level, log.propagate
	handler_state = [(h, h.level, h.formatter) for h in handlers]
	try:
		yield
	finally:
		for handler in log.handlers:
			if handler not in handlers:
				handler.close()
		log.handlers[:] = handlers
		log.setLevel(level)
		log.propagate = propagate
		for handler, handler_level, formatter in handler_state:
			handler.setLevel(handler_level)
			handler.setFormatter(formatter)
