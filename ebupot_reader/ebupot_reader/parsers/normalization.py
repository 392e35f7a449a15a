# -*- coding: utf-8 -*-
# Copyright (c) 2026, Ebupot Reader and contributors
# For license information, please see license.txt

"""
Normalization utilities shared by the e-Bupot layout parsers.

Handles ddmmyyyy dates, "document name + glued date" lines and whitespace
cleanup, plus the error types every parser reports through.
"""

import logging
import re
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)

try:
	import frappe
	logger = frappe.logger()
except ImportError:
	pass

DATE_DIGITS = 8

_WHITESPACE_RE = re.compile(r"\s")
_ASCII_DIGITS_RE = re.compile(r"[0-9]+")


# ============================================================================
# ERRORS
# ============================================================================

class EbupotReaderError(Exception):
	"""Base error for e-Bupot parsing."""


class MalformedFieldError(EbupotReaderError, ValueError):
	"""A line is too short, or lacks the delimiter, for a fixed slice rule."""

	def __init__(self, field: str, message: str):
		self.field = field
		self.message = message
		super().__init__(f"{field}: {message}")


class ParsingError:
	"""Track parsing errors for better debugging."""

	def __init__(self, field: str, message: str, severity: str = "WARNING"):
		self.field = field
		self.message = message
		self.severity = severity  # "ERROR", "WARNING", "INFO"

	def __str__(self):
		return f"[{self.severity}] {self.field}: {self.message}"


class ParsingErrorCollector:
	"""Collect errors during parsing."""

	def __init__(self):
		self.errors: List[ParsingError] = []

	def add_error(self, field: str, message: str, severity: str = "WARNING"):
		error = ParsingError(field, message, severity)
		self.errors.append(error)
		return error

	def has_errors(self) -> bool:
		return len(self.errors) > 0

	def has_severity(self, severity: str) -> bool:
		return any(e.severity == severity for e in self.errors)

	def get_error_messages(self) -> List[str]:
		return [str(e) for e in self.errors]


# ============================================================================
# DATES
# ============================================================================

def ddmmyyyy_to_iso(ddmmyyyy: str) -> str:
	"""
	Convert a ddmmyyyy digit string to yyyy-mm-dd by fixed slicing.

	No validation is done: short or non-digit input gives a short or
	garbage result rather than an error.

	Examples:
		>>> ddmmyyyy_to_iso("05082023")
		'2023-08-05'
		>>> ddmmyyyy_to_iso("0508")
		'-08-05'
	"""
	return f"{ddmmyyyy[4:8]}-{ddmmyyyy[2:4]}-{ddmmyyyy[0:2]}"


def split_trailing_date(text: str) -> Tuple[str, str]:
	"""
	Split "<document name><ddmmyyyy>" on its last 8 characters.

	Returns:
		(document_name, iso_date)
	"""
	return text[:-DATE_DIGITS], ddmmyyyy_to_iso(text[-DATE_DIGITS:])


def split_doc_date(line: str) -> Tuple[str, str]:
	"""
	Split a line ending in a date whose digits may be separated by spaces.

	Walks from the end of the line towards the start, skipping spaces, until
	8 characters are collected. Everything left of the stopping index is the
	document name. Index 0 is never collected, so a line with fewer than
	8 usable characters yields an empty name and a truncated date.

	Examples:
		>>> split_doc_date("INVOICE LABEL   05082023")
		('INVOICE LABEL   ', '2023-08-05')
		>>> split_doc_date("SPK 001 0508 2023")
		('SPK 001 ', '2023-08-05')
	"""
	digits: List[str] = []
	i = len(line) - 1
	while i > 0:
		if line[i] != " ":
			digits.append(line[i])
		if len(digits) >= DATE_DIGITS:
			break
		i -= 1

	if len(digits) < DATE_DIGITS:
		logger.debug(f"[EBUPOT] Only {len(digits)} date characters found in '{line}'")

	digits.reverse()
	return line[:max(i, 0)], ddmmyyyy_to_iso("".join(digits))


# ============================================================================
# TEXT
# ============================================================================

def remove_whitespace(text: str) -> str:
	return _WHITESPACE_RE.sub("", text)


def is_ascii_digits(text: str, length: Optional[int] = None) -> bool:
	if not _ASCII_DIGITS_RE.fullmatch(text):
		return False
	return length is None or len(text) == length
