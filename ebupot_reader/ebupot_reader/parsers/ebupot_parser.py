# -*- coding: utf-8 -*-
# Copyright (c) 2026, Ebupot Reader and contributors
# For license information, please see license.txt

"""
Entry point for e-Bupot text parsing: detect the layout, then run its parser.
"""

import logging
from typing import Callable, Dict, Optional, Union

from .format_a_parser import FormatAParser
from .format_b_parser import FormatBParser
from .format_c_parser import FormatCParser
from .models import EbupotFormat, ExtractedRecord, ExtractionResult
from .normalization import ParsingErrorCollector
from .signature import detect_ebupot_format
from .state_machine import LayoutStateMachine

logger = logging.getLogger(__name__)

try:
	import frappe
	logger = frappe.logger()
except ImportError:
	pass

LAYOUT_PARSERS: Dict[EbupotFormat, Callable[..., LayoutStateMachine]] = {
	EbupotFormat.A: FormatAParser,
	EbupotFormat.B: FormatBParser,
	EbupotFormat.C: FormatCParser,
}


def _as_format(fmt: Union[EbupotFormat, str]) -> Optional[EbupotFormat]:
	try:
		return EbupotFormat(fmt)
	except ValueError:
		return None


def extract_ebupot(
	text: str,
	fmt: Union[EbupotFormat, str],
	collector: Optional[ParsingErrorCollector] = None,
	strict: bool = False,
) -> ExtractedRecord:
	"""
	Run the parser matching ``fmt`` over ``text``.

	Empty, unrecognized or unknown tags give a record with every field at
	its default instead of raising.
	"""
	parser_cls = LAYOUT_PARSERS.get(_as_format(fmt))
	if parser_cls is None:
		return ExtractedRecord()
	return parser_cls(collector, strict).run(text)


def parse_ebupot_text(
	text: str, collector: Optional[ParsingErrorCollector] = None, strict: bool = False
) -> ExtractionResult:
	"""
	Detect the layout of ``text`` and extract its fields.

	Args:
		text: Full text layer of the certificate PDF
		collector: Optional collector that receives parsing warnings and errors
		strict: Raise MalformedFieldError instead of leaving a field empty

	Returns:
		ExtractionResult with the detected format, the record, whether the
		layout parser reached its final state and the collected messages
	"""
	if collector is None:
		collector = ParsingErrorCollector()

	fmt = detect_ebupot_format(text)
	logger.info(f"[EBUPOT] Detected format {fmt.value}")

	parser_cls = LAYOUT_PARSERS.get(fmt)
	if parser_cls is None:
		if fmt is EbupotFormat.UNRECOGNIZED:
			collector.add_error("format", "No known e-Bupot layout signature found", "WARNING")
		return ExtractionResult(
			format=fmt,
			record=ExtractedRecord(),
			errors=collector.get_error_messages(),
		)

	parser = parser_cls(collector, strict)
	record = parser.run(text)
	return ExtractionResult(
		format=fmt,
		record=record,
		is_complete=parser.is_complete,
		halted_state="" if parser.is_complete else parser.state.name,
		errors=collector.get_error_messages(),
	)
