# -*- coding: utf-8 -*-
# Copyright (c) 2026, Ebupot Reader and contributors
# For license information, please see license.txt

"""
Descrambling tables for fields the layout B text layer emits out of order.

The NPWP box and the narrow date cells of layout B are drawn rotated, so the
PDF text layer yields their characters in a fixed but shuffled order. Each
table below lists, for every output position, the index of the scrambled
input character to read. A ``SEPARATOR`` entry inserts a literal "-".
"""

from typing import Optional, Sequence, Union

from .normalization import MalformedFieldError

SEPARATOR = "-"

PermutationTable = Sequence[Union[int, str]]

# B.7 document date cell: 8 scrambled characters -> yyyy-mm-dd
SUPPORTING_DOC_DATE_TABLE: PermutationTable = (1, 2, 7, 5, SEPARATOR, 3, 4, SEPARATOR, 0, 6)

# C.1 NPWP: 15 scrambled digits -> 15 digits in reading order
TAXPAYER_ID_TABLE: PermutationTable = (7, 11, 14, 9, 3, 5, 12, 13, 1, 6, 2, 10, 0, 8, 4)

# C.3 certificate date: 8 scrambled characters -> yyyy-mm-dd
CERTIFICATE_DATE_TABLE: PermutationTable = (1, 7, 2, 4, SEPARATOR, 0, 6, SEPARATOR, 5, 3)


def source_indices(table: PermutationTable) -> list:
	"""Input indices a table reads, in output order, separators dropped."""
	return [entry for entry in table if entry != SEPARATOR]


def required_length(table: PermutationTable) -> int:
	indices = source_indices(table)
	return max(indices) + 1 if indices else 0


def is_bijection(table: PermutationTable, size: Optional[int] = None) -> bool:
	"""True when the table reads every index 0..size-1 exactly once."""
	indices = source_indices(table)
	if size is None:
		size = len(indices)
	return sorted(indices) == list(range(size))


def descramble(text: str, table: PermutationTable, field: str = "value") -> str:
	"""
	Rebuild ``text`` in reading order using ``table``.

	Raises:
		MalformedFieldError: if ``text`` is shorter than the highest index the
			table reads.

	Examples:
		>>> descramble("ABCDEFGH", CERTIFICATE_DATE_TABLE)
		'BHCE-AG-FD'
	"""
	needed = required_length(table)
	if len(text) < needed:
		raise MalformedFieldError(
			field, f"expected at least {needed} characters, got {len(text)}: '{text}'"
		)
	return "".join(SEPARATOR if entry == SEPARATOR else text[entry] for entry in table)
