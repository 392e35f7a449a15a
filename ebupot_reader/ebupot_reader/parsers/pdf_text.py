# -*- coding: utf-8 -*-
# Copyright (c) 2026, Ebupot Reader and contributors
# For license information, please see license.txt

"""
PyMuPDF-based text layer reader for e-Bupot PDFs.

The layout parsers match anchors against whole lines, so the text is returned
exactly as the PDF text layer segments it. Nothing is re-flowed or sorted.
"""

import logging
from pathlib import Path
from typing import Optional, Union

import fitz  # PyMuPDF

from .normalization import EbupotReaderError

logger = logging.getLogger(__name__)

try:
	import frappe
	logger = frappe.logger()
except ImportError:
	pass

BYTES_PER_MB = 1024 * 1024


class PdfTextError(EbupotReaderError, ValueError):
	"""PDF could not be opened or has no readable pages."""


def extract_text_from_bytes(
	pdf_bytes: bytes,
	source_name: str = "bytes",
	max_pages: Optional[int] = None,
	page_separator: str = "\n\n",
	max_mb: Optional[float] = None,
) -> str:
	"""
	Extract the plain text layer from PDF bytes using PyMuPDF.

	Args:
		pdf_bytes: PDF content as bytes
		source_name: Name for logging (e.g., file path)
		max_pages: Read at most this many pages (None reads all)
		page_separator: Inserted between page texts
		max_mb: Reject PDFs larger than this many megabytes

	Returns:
		Text of the selected pages joined by ``page_separator``

	Raises:
		PdfTextError: If the PDF is empty, too large, encrypted, corrupted or
			has no pages
	"""
	if not pdf_bytes:
		raise PdfTextError("PDF bytes is empty or None")

	if max_mb is not None and len(pdf_bytes) > max_mb * BYTES_PER_MB:
		raise PdfTextError(
			f"PDF too large ({len(pdf_bytes) / BYTES_PER_MB:.1f} MB > {max_mb} MB): {source_name}"
		)

	doc = None
	try:
		doc = fitz.open(stream=pdf_bytes, filetype="pdf")

		if doc.is_encrypted:
			if not doc.authenticate(""):  # Try empty password
				raise PdfTextError(f"PDF is encrypted and requires password: {source_name}")
			logger.info(f"[PDF] PDF encrypted but opened with empty password: {source_name}")

		page_count = len(doc)
		if page_count == 0:
			raise PdfTextError(f"PDF has no pages: {source_name}")

		if max_pages is not None:
			page_count = min(page_count, max_pages)

		pages = [doc[page_index].get_text("text") for page_index in range(page_count)]
		text = page_separator.join(pages)

		logger.info(f"[PDF] Extracted {len(text)} characters from {page_count} page(s): {source_name}")
		if not text.strip():
			logger.warning(f"[PDF] No text layer found: {source_name}. PDF may be a scanned image.")

		return text

	except fitz.FileDataError as e:
		raise PdfTextError(f"PDF file is corrupted or invalid: {source_name}. Error: {e}") from e

	finally:
		if doc is not None and not doc.is_closed:
			doc.close()


def extract_text_from_path(path: Union[str, Path], **kwargs) -> str:
	"""Read a PDF from disk and return its text layer. See ``extract_text_from_bytes``."""
	pdf_path = Path(path)
	if not pdf_path.is_file():
		raise PdfTextError(f"PDF file not found: {pdf_path}")
	return extract_text_from_bytes(pdf_path.read_bytes(), source_name=str(pdf_path), **kwargs)
