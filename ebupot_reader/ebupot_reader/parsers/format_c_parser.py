# -*- coding: utf-8 -*-
# Copyright (c) 2026, Ebupot Reader and contributors
# For license information, please see license.txt

"""
Parser for layout C certificates.

Layout C has no scrambled fields but a fixed line order after the footer
sentence "Bukti Pemotongan ini.". The line after the amount row is either a
B.8 prior document (followed directly by the NPWP) or a B.7 supporting
document spread over two lines (NPWP comes one line later).
"""

import logging
from enum import IntEnum
from typing import List, Optional

from .models import EbupotFormat, ExtractedRecord
from .normalization import (
	ParsingErrorCollector,
	ddmmyyyy_to_iso,
	is_ascii_digits,
	remove_whitespace,
	split_doc_date,
)
from .state_machine import LayoutStateMachine

logger = logging.getLogger(__name__)

try:
	import frappe
	logger = frappe.logger()
except ImportError:
	pass

ANCHOR = "Bukti Pemotongan ini."
NPWP_LENGTH = 15
AMOUNT_SPLIT_AFTER_DASH = 5
AMOUNT_END_AFTER_DASH = 14


class FormatCState(IntEnum):
	SKIP_ANCHOR = 0
	CERTIFICATE_NUMBER = 1
	SKIP_LINE_1 = 2
	SKIP_LINE_2 = 3
	SKIP_LINE_3 = 4
	SKIP_LINE_4 = 5
	AMOUNT_ROW = 6
	SKIP_LINE_5 = 7
	FIRST_DOCUMENT_LINE = 8
	NPWP_OR_DOCUMENT_LINE = 9
	TAXPAYER_ID = 10
	ASSIGN_DOCUMENTS = 11
	CERTIFICATE_DATE = 12
	DONE = 13


class FormatCParser(LayoutStateMachine):
	layout = EbupotFormat.C
	anchor = ANCHOR
	State = FormatCState

	def __init__(self, collector: Optional[ParsingErrorCollector] = None, strict: bool = False):
		super().__init__(collector, strict)
		self.buffered_lines: List[str] = []
		self.has_supporting_document = False

	def _handle_skip_anchor(self, line: str) -> FormatCState:
		return FormatCState.CERTIFICATE_NUMBER

	def _handle_certificate_number(self, line: str) -> FormatCState:
		self.record.certificate_number = remove_whitespace(line)
		return FormatCState.SKIP_LINE_1

	def _handle_skip_line_1(self, line: str) -> FormatCState:
		return FormatCState.SKIP_LINE_2

	def _handle_skip_line_2(self, line: str) -> FormatCState:
		return FormatCState.SKIP_LINE_3

	def _handle_skip_line_3(self, line: str) -> FormatCState:
		return FormatCState.SKIP_LINE_4

	def _handle_skip_line_4(self, line: str) -> FormatCState:
		return FormatCState.AMOUNT_ROW

	def _handle_amount_row(self, line: str) -> FormatCState:
		dash = line.find("-")
		if dash < 0:
			self.malformed("b1", f"No '-' in amount row: '{line}'")
		else:
			self.record.amount_ref_1 = line[:dash + AMOUNT_SPLIT_AFTER_DASH]
			self.record.amount_ref_2 = line[dash + AMOUNT_SPLIT_AFTER_DASH:dash + AMOUNT_END_AFTER_DASH]
		return FormatCState.SKIP_LINE_5

	def _handle_skip_line_5(self, line: str) -> FormatCState:
		return FormatCState.FIRST_DOCUMENT_LINE

	def _handle_first_document_line(self, line: str) -> FormatCState:
		self.buffered_lines.append(line)
		return FormatCState.NPWP_OR_DOCUMENT_LINE

	def _handle_npwp_or_document_line(self, line: str) -> FormatCState:
		npwp = remove_whitespace(line)
		if is_ascii_digits(npwp, NPWP_LENGTH):
			self.record.taxpayer_id = npwp
			return FormatCState.ASSIGN_DOCUMENTS
		self.buffered_lines.append(line)
		self.has_supporting_document = True
		return FormatCState.TAXPAYER_ID

	def _handle_taxpayer_id(self, line: str) -> FormatCState:
		self.record.taxpayer_id = remove_whitespace(line)
		return FormatCState.ASSIGN_DOCUMENTS

	def _handle_assign_documents(self, line: str) -> FormatCState:
		if self.has_supporting_document:
			first, second = self.buffered_lines
			self.record.supporting_documents.append(first)
			self.record.supporting_documents.extend(split_doc_date(second))
		else:
			self.record.prior_documents.extend(split_doc_date(self.buffered_lines[0]))
		logger.debug(
			f"{self.tag} B.7={self.record.supporting_documents} B.8={self.record.prior_documents}"
		)
		return FormatCState.CERTIFICATE_DATE

	def _handle_certificate_date(self, line: str) -> FormatCState:
		self.record.certificate_date = ddmmyyyy_to_iso(remove_whitespace(line))
		return FormatCState.DONE


def extract_format_c(
	text: str, collector: Optional[ParsingErrorCollector] = None, strict: bool = False
) -> ExtractedRecord:
	"""Extract the fields of a layout C certificate text layer."""
	return FormatCParser(collector, strict).run(text)
