# -*- coding: utf-8 -*-
# Copyright (c) 2026, Ebupot Reader and contributors
# For license information, please see license.txt

"""
Parser for layout B certificates.

Layout B renders the NPWP box and the date cells rotated, so their characters
reach the text layer shuffled. The fixed tables in ``permutation`` put them
back in reading order.

Line flow after "PPh Tidak Final"::

    PPh Tidak Final ...
    <skipped>
    <H.1>
    ...
    B.1B.2B.3B.4B.5B.6
    <amount row: ... <B.2 around the first "-"> ... <B.1 at the end>>
    ...
    ddmmyyyy
    <B.7 document name>        or "B.9" when there is no document
    <B.7 name tail><scrambled date, 8 chars>
    <reserved line>
    ...
    C. IDENTITAS PEMOTONG ...
    <scrambled NPWP, 15 chars>
    ...
    C.2Nama Wajib Pajak:
    <scrambled C.3 date, 8 chars>
"""

from enum import IntEnum
from typing import Optional, Tuple

from .models import EbupotFormat, ExtractedRecord
from .normalization import DATE_DIGITS, MalformedFieldError, ParsingErrorCollector
from .permutation import (
	CERTIFICATE_DATE_TABLE,
	SUPPORTING_DOC_DATE_TABLE,
	TAXPAYER_ID_TABLE,
	descramble,
)
from .state_machine import LayoutStateMachine

ANCHOR = "PPh Tidak Final"
AMOUNT_HEADER = "B.1B.2B.3B.4B.5B.6"
DOC_DATE_HEADER = "ddmmyyyy"
NO_DOCUMENT_MARKER = "B.9"
IDENTITY_SECTION_PREFIX = "C. IDENTITAS PEMOTONG"
CERT_DATE_LABEL = "C.2Nama Wajib Pajak:"

# Position, counted from the end of the amount row, of the comma that marks a
# 7-character B.1 value.
AMOUNT_REF_1_COMMA_OFFSET = 11
AMOUNT_REF_2_BEFORE_DASH = 2
AMOUNT_REF_2_AFTER_DASH = 7


class FormatBState(IntEnum):
	SKIP_ANCHOR = 0
	SKIP_LINE = 1
	CERTIFICATE_NUMBER = 2
	SEEK_AMOUNT_HEADER = 3
	AMOUNT_ROW = 4
	SEEK_DOC_DATE_HEADER = 5
	DOCUMENT_NAME = 6
	DOCUMENT_DATE = 7
	RESERVED = 8
	SEEK_IDENTITY_SECTION = 9
	TAXPAYER_ID = 10
	SEEK_CERT_DATE_LABEL = 11
	CERTIFICATE_DATE = 12
	DONE = 13


def extract_amount_refs(line: str) -> Tuple[str, Optional[str]]:
	"""
	Pull B.1 and B.2 out of the amount row.

	B.1 is the last 7 characters when a comma sits 11 characters from the
	end, otherwise the last 6. B.2 spans from 2 characters before the first
	"-" to 7 characters after it.

	Returns:
		(amount_ref_1, amount_ref_2) where amount_ref_2 is None if the row
		has no "-"
	"""
	if line[-AMOUNT_REF_1_COMMA_OFFSET:-AMOUNT_REF_1_COMMA_OFFSET + 1] == ",":
		amount_ref_1 = line[-7:]
	else:
		amount_ref_1 = line[-6:]

	dash = line.find("-")
	if dash < 0:
		return amount_ref_1, None
	start = max(dash - AMOUNT_REF_2_BEFORE_DASH, 0)
	return amount_ref_1, line[start:dash + AMOUNT_REF_2_AFTER_DASH]


class FormatBParser(LayoutStateMachine):
	layout = EbupotFormat.B
	anchor = ANCHOR
	State = FormatBState

	def _descramble(self, text: str, table, field: str) -> str:
		try:
			return descramble(text, table, field)
		except MalformedFieldError as e:
			self.malformed(field, e.message)
			return ""

	def _handle_skip_anchor(self, line: str) -> FormatBState:
		return FormatBState.SKIP_LINE

	def _handle_skip_line(self, line: str) -> FormatBState:
		return FormatBState.CERTIFICATE_NUMBER

	def _handle_certificate_number(self, line: str) -> FormatBState:
		self.record.certificate_number = line
		return FormatBState.SEEK_AMOUNT_HEADER

	def _handle_seek_amount_header(self, line: str) -> FormatBState:
		if line == AMOUNT_HEADER:
			return FormatBState.AMOUNT_ROW
		return self.state

	def _handle_amount_row(self, line: str) -> FormatBState:
		amount_ref_1, amount_ref_2 = extract_amount_refs(line)
		self.record.amount_ref_1 = amount_ref_1
		if amount_ref_2 is None:
			self.malformed("b2", f"No '-' in amount row: '{line}'")
		else:
			self.record.amount_ref_2 = amount_ref_2
		return FormatBState.SEEK_DOC_DATE_HEADER

	def _handle_seek_doc_date_header(self, line: str) -> FormatBState:
		if line == DOC_DATE_HEADER:
			return FormatBState.DOCUMENT_NAME
		return self.state

	def _handle_document_name(self, line: str) -> FormatBState:
		if line == NO_DOCUMENT_MARKER:
			self.record.supporting_documents.extend(["", "", ""])
			return FormatBState.RESERVED
		self.record.supporting_documents.append(line)
		return FormatBState.DOCUMENT_DATE

	def _handle_document_date(self, line: str) -> FormatBState:
		name, scrambled = line[:-DATE_DIGITS], line[-DATE_DIGITS:]
		self.record.supporting_documents.append(name)
		self.record.supporting_documents.append(
			self._descramble(scrambled, SUPPORTING_DOC_DATE_TABLE, "b7")
		)
		return FormatBState.RESERVED

	def _handle_reserved(self, line: str) -> FormatBState:
		# TODO: B.8 prior documents are not located in layout B yet; needs a sample with B.8 filled
		return FormatBState.SEEK_IDENTITY_SECTION

	def _handle_seek_identity_section(self, line: str) -> FormatBState:
		if line.startswith(IDENTITY_SECTION_PREFIX):
			return FormatBState.TAXPAYER_ID
		return self.state

	def _handle_taxpayer_id(self, line: str) -> FormatBState:
		self.record.taxpayer_id = self._descramble(line, TAXPAYER_ID_TABLE, "c1")
		return FormatBState.SEEK_CERT_DATE_LABEL

	def _handle_seek_cert_date_label(self, line: str) -> FormatBState:
		if line == CERT_DATE_LABEL:
			return FormatBState.CERTIFICATE_DATE
		return self.state

	def _handle_certificate_date(self, line: str) -> FormatBState:
		self.record.certificate_date = self._descramble(line, CERTIFICATE_DATE_TABLE, "c3")
		return FormatBState.DONE


def extract_format_b(
	text: str, collector: Optional[ParsingErrorCollector] = None, strict: bool = False
) -> ExtractedRecord:
	"""Extract the fields of a layout B certificate text layer."""
	return FormatBParser(collector, strict).run(text)
