# -*- coding: utf-8 -*-
# Copyright (c) 2026, Ebupot Reader and contributors
# For license information, please see license.txt

"""
Data model for e-Bupot (Bukti Pemotongan) extraction results.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


class EbupotFormat(str, Enum):
	"""Layout signature of a certificate's text layer."""

	A = "A"
	B = "B"
	C = "C"
	EMPTY = "Z"
	UNRECOGNIZED = "U"

	@property
	def is_supported(self) -> bool:
		return self in (EbupotFormat.A, EbupotFormat.B, EbupotFormat.C)


@dataclass
class ExtractedRecord:
	"""
	Fields pulled from one certificate.

	Attributes:
		certificate_number: H.1 - nomor bukti pemotongan
		amount_ref_1: B.1 - first withheld-amount reference fragment
		amount_ref_2: B.2 - second withheld-amount reference fragment
		supporting_documents: B.7 - alternating [name, yyyy-mm-dd, ...]
		prior_documents: B.8 - alternating [name, yyyy-mm-dd, ...]
		taxpayer_id: C.1 - NPWP pemotong, 15 digits
		certificate_date: C.3 - tanggal bukti pemotongan, yyyy-mm-dd
	"""

	certificate_number: str = ""
	amount_ref_1: str = ""
	amount_ref_2: str = ""
	supporting_documents: List[str] = field(default_factory=list)
	prior_documents: List[str] = field(default_factory=list)
	taxpayer_id: str = ""
	certificate_date: str = ""

	def to_dict(self) -> Dict[str, Any]:
		"""Serialize with the field codes used on the certificate form."""
		return {
			"h1": self.certificate_number,
			"b1": self.amount_ref_1,
			"b2": self.amount_ref_2,
			"b7": list(self.supporting_documents),
			"b8": list(self.prior_documents),
			"c1": self.taxpayer_id,
			"c3": self.certificate_date,
		}

	def filled_fields(self) -> List[str]:
		return [code for code, value in self.to_dict().items() if value]


@dataclass
class ExtractionResult:
	format: EbupotFormat
	record: ExtractedRecord = field(default_factory=ExtractedRecord)
	is_complete: bool = False
	halted_state: str = ""
	errors: List[str] = field(default_factory=list)

	def to_response(self) -> Dict[str, Any]:
		return {
			"format": self.format.value,
			"data": self.record.to_dict(),
			"complete": self.is_complete,
			"errors": list(self.errors),
		}
