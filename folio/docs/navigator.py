"""Navigation views over a markdown document.

Three views, each returning a PaginationResult:
- table_of_contents: numbered heading list
- find_section: one section by case-insensitive partial title match
- get_page: a fixed-size window of lines

Not-found sections and out-of-range pages are ordinary results with an
explanatory message, not errors.
"""

import math

from folio.docs.parser import parse_sections, split_lines
from folio.types import PaginationMetadata, PaginationResult


def table_of_contents(content: str) -> PaginationResult:
	"""Build a numbered table of contents.

	Entries are numbered sequentially in document order and indented two
	spaces per heading level below h1.
	"""
	sections = parse_sections(content)

	lines = [
		"# Documentation - Table of Contents",
		"",
		"Use the `section` parameter to retrieve specific sections.",
		"",
		"## Available Sections",
		"",
	]
	for number, section in enumerate(sections, 1):
		indent = "  " * (section.level - 1)
		lines.append(f"{indent}{number}. {section.title}")

	lines.extend(
		[
			"",
			"## Usage Examples",
			"",
			'- Get specific section: `{ "type": "standard", "section": "Core Concepts" }`',
			'- Get page 1: `{ "type": "standard", "page": 1, "page_size": 5000 }`',
		]
	)

	return PaginationResult(
		content="\n".join(lines) + "\n",
		metadata=PaginationMetadata(total_sections=len(sections)),
	)


def find_section(content: str, query: str) -> PaginationResult:
	"""Find the first section whose title contains query, ignoring case.

	First match in document order wins; there is no ranking by match quality.

	Args:
	    content: Markdown document
	    query: Partial section title

	Returns:
	    The matched section body with its title in current_section, or a
	    not-found message listing every available title
	"""
	sections = parse_sections(content)
	needle = query.lower()

	for section in sections:
		if needle in section.title.lower():
			return PaginationResult(
				content=section.body,
				metadata=PaginationMetadata(
					total_sections=len(sections),
					current_section=section.title,
				),
			)

	available = "\n- ".join(s.title for s in sections)
	return PaginationResult(
		content=(
			f'# Section Not Found\n\nCould not find section matching: "{query}"\n\n'
			f"## Available sections:\n- {available}"
		),
		metadata=PaginationMetadata(total_sections=len(sections)),
	)


def count_pages(content: str, page_size: int) -> int:
	"""Number of pages needed to hold content at page_size lines per page."""
	return _pages_for(len(split_lines(content)), page_size)


def _pages_for(line_count: int, page_size: int) -> int:
	if page_size <= 0:
		raise ValueError(f"page_size must be positive, got {page_size}")
	return math.ceil(line_count / page_size)


def get_page(content: str, page: int, page_size: int) -> PaginationResult:
	"""Get one 1-indexed page of page_size lines.

	Args:
	    content: Markdown document
	    page: Page number, starting at 1
	    page_size: Lines per page

	Returns:
	    The page's lines joined with newlines, or an invalid-page message if
	    page is outside [1, total_pages]

	Raises:
	    ValueError: If page_size is not positive
	"""
	lines = split_lines(content)
	total_pages = _pages_for(len(lines), page_size)

	if page < 1 or page > total_pages:
		return PaginationResult(
			content=(
				f"# Invalid Page\n\nPage {page} is out of range. "
				f"Total pages: {total_pages} (page size: {page_size} lines)"
			),
			metadata=PaginationMetadata(total_pages=total_pages, page_size=page_size),
		)

	start = (page - 1) * page_size
	end = min(page * page_size, len(lines))

	return PaginationResult(
		content="\n".join(lines[start:end]),
		metadata=PaginationMetadata(
			total_pages=total_pages,
			current_page=page,
			page_size=page_size,
		),
	)
