# -*- coding: utf-8 -*-
# Copyright (c) 2026, Ebupot Reader and contributors
# For license information, please see license.txt

"""
Parser for layout A certificates.

Layout A text starts at "Dokumen Referensi" and flows roughly as::

    Dokumen Referensi
    <header>
    <B.7 capture>              pushed as-is, dropped again if no date follows
    ...
    yyyy
    <B.7 name><ddmmyyyy>       empty when there is no supporting document
    ...
    Tanggal
    <B.8 name + date, possibly wrapped over several lines>
    B.9
    ...
    C.1
    ...
    :NPWP
    <NPWP, possibly wrapped>
    Nama Wajib PajakC.2:
    ...
    mmyyyy
    <C.3 ddmmyyyy, possibly wrapped>
    C.4
    ...
    ... Bukti Pemotongan ini.
    <H.1>
    <short lines>
    <B.1>                      first line longer than 4 characters
    <B.2>
"""

from enum import IntEnum
from typing import Optional

from .models import EbupotFormat, ExtractedRecord
from .normalization import ParsingErrorCollector, ddmmyyyy_to_iso, split_trailing_date
from .state_machine import LayoutStateMachine

ANCHOR = "Dokumen Referensi"
DOC_DATE_HEADER = "yyyy"
PRIOR_DOC_LABEL = "Tanggal"
PRIOR_DOC_END = "B.9"
IDENTITY_SECTION = "C.1"
NPWP_LABEL = ":NPWP"
NPWP_END = "Nama Wajib PajakC.2:"
CERT_DATE_HEADER = "mmyyyy"
CERT_DATE_END = "C.4"
FOOTER_MARKER = "Bukti Pemotongan ini."
MIN_AMOUNT_REF_LENGTH = 5


class FormatAState(IntEnum):
	SKIP_HEADER = 0
	CAPTURE_DOCUMENT = 1
	SEEK_DOC_DATE_HEADER = 2
	SUPPORTING_DOCUMENT = 3
	SEEK_PRIOR_DOC_LABEL = 4
	PRIOR_DOCUMENT = 5
	SEEK_IDENTITY_SECTION = 6
	SEEK_NPWP_LABEL = 7
	TAXPAYER_ID = 8
	SEEK_CERT_DATE_HEADER = 9
	CERTIFICATE_DATE = 10
	SEEK_FOOTER = 11
	CERTIFICATE_NUMBER = 12
	AMOUNT_REF_1 = 13
	AMOUNT_REF_2 = 14
	DONE = 15


class FormatAParser(LayoutStateMachine):
	layout = EbupotFormat.A
	anchor = ANCHOR
	State = FormatAState

	def __init__(self, collector: Optional[ParsingErrorCollector] = None, strict: bool = False):
		super().__init__(collector, strict)
		self.buffer = ""

	def _flush(self) -> str:
		value, self.buffer = self.buffer, ""
		return value

	def _seek(self, line: str, marker: str, on_match: FormatAState) -> FormatAState:
		return on_match if line == marker else self.state

	def _handle_skip_header(self, line: str) -> FormatAState:
		return FormatAState.CAPTURE_DOCUMENT

	def _handle_capture_document(self, line: str) -> FormatAState:
		self.record.supporting_documents.append(line)
		return FormatAState.SEEK_DOC_DATE_HEADER

	def _handle_seek_doc_date_header(self, line: str) -> FormatAState:
		return self._seek(line, DOC_DATE_HEADER, FormatAState.SUPPORTING_DOCUMENT)

	def _handle_supporting_document(self, line: str) -> FormatAState:
		if line == "":
			# no supporting document, the capture was a column label
			self.record.supporting_documents.pop()
		else:
			self.record.supporting_documents.extend(split_trailing_date(line))
		return FormatAState.SEEK_PRIOR_DOC_LABEL

	def _handle_seek_prior_doc_label(self, line: str) -> FormatAState:
		return self._seek(line, PRIOR_DOC_LABEL, FormatAState.PRIOR_DOCUMENT)

	def _handle_prior_document(self, line: str) -> FormatAState:
		if line != PRIOR_DOC_END:
			self.buffer += line
			return self.state
		prior = self._flush()
		if prior:
			self.record.prior_documents.extend(split_trailing_date(prior))
		return FormatAState.SEEK_IDENTITY_SECTION

	def _handle_seek_identity_section(self, line: str) -> FormatAState:
		return self._seek(line, IDENTITY_SECTION, FormatAState.SEEK_NPWP_LABEL)

	def _handle_seek_npwp_label(self, line: str) -> FormatAState:
		return self._seek(line, NPWP_LABEL, FormatAState.TAXPAYER_ID)

	def _handle_taxpayer_id(self, line: str) -> FormatAState:
		if line != NPWP_END:
			self.buffer += line
			return self.state
		self.record.taxpayer_id = self._flush()
		return FormatAState.SEEK_CERT_DATE_HEADER

	def _handle_seek_cert_date_header(self, line: str) -> FormatAState:
		return self._seek(line, CERT_DATE_HEADER, FormatAState.CERTIFICATE_DATE)

	def _handle_certificate_date(self, line: str) -> FormatAState:
		if line != CERT_DATE_END:
			self.buffer += line
			return self.state
		self.record.certificate_date = ddmmyyyy_to_iso(self._flush())
		return FormatAState.SEEK_FOOTER

	def _handle_seek_footer(self, line: str) -> FormatAState:
		if FOOTER_MARKER in line:
			return FormatAState.CERTIFICATE_NUMBER
		return self.state

	def _handle_certificate_number(self, line: str) -> FormatAState:
		self.record.certificate_number = line
		return FormatAState.AMOUNT_REF_1

	def _handle_amount_ref_1(self, line: str) -> FormatAState:
		if len(line) < MIN_AMOUNT_REF_LENGTH:
			return self.state
		self.record.amount_ref_1 = line
		return FormatAState.AMOUNT_REF_2

	def _handle_amount_ref_2(self, line: str) -> FormatAState:
		self.record.amount_ref_2 = line
		return FormatAState.DONE


def extract_format_a(
	text: str, collector: Optional[ParsingErrorCollector] = None, strict: bool = False
) -> ExtractedRecord:
	"""Extract the fields of a layout A certificate text layer."""
	return FormatAParser(collector, strict).run(text)
