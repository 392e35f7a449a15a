# -*- coding: utf-8 -*-
# Copyright (c) 2026, Ebupot Reader and contributors
# For license information, please see license.txt

"""
Line-driven state machine shared by the layout A, B and C parsers.

Each layout parser declares an ``IntEnum`` of states ending in ``DONE`` and
one ``_handle_<state name>`` method per state. A handler receives the current
line and returns the next state. The walk ends at ``DONE`` or when the lines
run out; in the latter case the record keeps whatever was filled so far.
"""

import logging
from enum import IntEnum
from typing import Callable, Dict, List, Optional, Type

from .models import EbupotFormat, ExtractedRecord
from .normalization import MalformedFieldError, ParsingErrorCollector

logger = logging.getLogger(__name__)

try:
	import frappe
	logger = frappe.logger()
except ImportError:
	pass


class LayoutStateMachine:
	layout: EbupotFormat
	anchor: str = ""
	State: Type[IntEnum]

	def __init__(self, collector: Optional[ParsingErrorCollector] = None, strict: bool = False):
		self.collector = collector if collector is not None else ParsingErrorCollector()
		self.strict = strict
		self.record = ExtractedRecord()
		self.state = self.State(0)
		self._handlers: Dict[IntEnum, Callable[[str], IntEnum]] = {
			state: getattr(self, f"_handle_{state.name.lower()}")
			for state in self.State
			if state is not self.State.DONE
		}

	@property
	def tag(self) -> str:
		return f"[EBUPOT-{self.layout.value}]"

	@property
	def is_complete(self) -> bool:
		return self.state is self.State.DONE

	def lines_after_anchor(self, text: str) -> List[str]:
		"""
		Split the text from the first occurrence of the entry anchor onwards.

		When the anchor is missing the whole text is walked.
		"""
		position = text.find(self.anchor)
		if position < 0:
			self.collector.add_error(
				"anchor", f"Entry anchor '{self.anchor}' not found, scanning whole text", "WARNING"
			)
			logger.warning(f"{self.tag} Entry anchor '{self.anchor}' not found")
			position = 0
		return text[position:].split("\n")

	def run(self, text: str) -> ExtractedRecord:
		for line in self.lines_after_anchor(text):
			next_state = self._handlers[self.state](line)
			if next_state is not self.state:
				logger.debug(f"{self.tag} {self.state.name} -> {next_state.name}")
			self.state = next_state
			if self.is_complete:
				break

		if not self.is_complete:
			self.collector.add_error(
				"state", f"Input ended in state {self.state.name}; later fields left empty", "WARNING"
			)
			logger.warning(f"{self.tag} Extraction halted at {self.state.name}")

		return self.record

	def malformed(self, field: str, message: str) -> None:
		"""Report a line that does not fit a fixed slice rule."""
		if self.strict:
			raise MalformedFieldError(field, message)
		self.collector.add_error(field, message, "ERROR")
		logger.error(f"{self.tag} {field}: {message}")
