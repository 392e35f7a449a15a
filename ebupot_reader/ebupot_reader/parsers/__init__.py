# -*- coding: utf-8 -*-
# Copyright (c) 2026, Ebupot Reader and contributors
# For license information, please see license.txt

"""
Parsers module for e-Bupot (Bukti Pemotongan) text extraction.
"""

from .models import (  # noqa: F401
	EbupotFormat,
	ExtractedRecord,
	ExtractionResult,
)

from .normalization import (  # noqa: F401
	EbupotReaderError,
	MalformedFieldError,
	ParsingError,
	ParsingErrorCollector,
	ddmmyyyy_to_iso,
	split_doc_date,
)

from .signature import detect_ebupot_format  # noqa: F401

from .ebupot_parser import (  # noqa: F401
	extract_ebupot,
	parse_ebupot_text,
)

from .format_a_parser import extract_format_a  # noqa: F401
from .format_b_parser import extract_format_b  # noqa: F401
from .format_c_parser import extract_format_c  # noqa: F401
