"""Split markdown into heading-delimited sections.

Only ATX headings (``#`` through ``######`` followed by whitespace and text)
start a section. Setext underlines are not headings here, and heading-like
lines inside code fences still count; documents served by llms.txt sites are
written with that in mind.
"""

import re

from folio.types import Section

HEADING_PATTERN = re.compile(r"^(#{1,6})\s+(.+)$")


def split_lines(content: str) -> list[str]:
	"""Split content on newlines.

	A single trailing newline terminates the last line rather than starting an
	empty one, so "a\\nb\\n" is two lines, the same as "a\\nb".

	Args:
	    content: Text to split

	Returns:
	    Lines without their newline characters
	"""
	lines = content.split("\n")
	if len(lines) > 1 and content.endswith("\n"):
		lines.pop()
	return lines


def parse_sections(content: str) -> list[Section]:
	"""Parse markdown into an ordered list of sections.

	Single left-to-right scan. Each heading closes the open section and opens a
	new one whose body starts with the heading line. Lines before the first
	heading belong to no section.

	Args:
	    content: Markdown content to parse

	Returns:
	    Sections in source order; empty if the content has no headings
	"""
	lines = split_lines(content)
	sections: list[Section] = []
	current: Section | None = None

	for index, line in enumerate(lines):
		match = HEADING_PATTERN.match(line)
		if match:
			if current is not None:
				current.end_line = index - 1
				sections.append(current)
			current = Section(
				title=match.group(2).strip(),
				level=len(match.group(1)),
				body=line + "\n",
				start_line=index,
				end_line=index,
			)
		elif current is not None:
			current.body += line + "\n"

	if current is not None:
		current.end_line = len(lines) - 1
		sections.append(current)

	return sections
