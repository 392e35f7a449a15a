# -*- coding: utf-8 -*-
# Copyright (c) 2026, Ebupot Reader and contributors
# For license information, please see license.txt

"""
Layout detection for e-Bupot text layers.
"""

import re
from typing import Tuple

from .models import EbupotFormat

# Checked in order, first match wins.
FORMAT_SIGNATURES: Tuple[Tuple[str, EbupotFormat], ...] = (
	("FORMULIR BPBS\nH.1\nH.2\nH.3", EbupotFormat.A),
	("FORMULIR BPBS\nBukti Pemotongan", EbupotFormat.B),
	("FORMULIR BPBS\nH.1\nNOMOR", EbupotFormat.C),
)

# Whitespace plus byte order marks, which PDF text layers sometimes carry.
_BLANK_RE = re.compile(r"[\s\ufeff]*")


def detect_ebupot_format(text: str) -> EbupotFormat:
	"""
	Classify a certificate text layer as layout A, B, C, empty or unrecognized.

	Args:
		text: Full text layer of the PDF

	Returns:
		EbupotFormat (EMPTY for blank text, UNRECOGNIZED when no signature matches)
	"""
	for signature, fmt in FORMAT_SIGNATURES:
		if signature in text:
			return fmt
	if _BLANK_RE.fullmatch(text):
		return EbupotFormat.EMPTY
	return EbupotFormat.UNRECOGNIZED
