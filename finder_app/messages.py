from __future__ import annotations

import re
from typing import List

NO_RESULTS = "No document contains that word or phrase."


def _query_words(query: str, max_terms: int = 3) -> List[str]:
	seen = set()
	uniq = []
	for t in re.findall(r"\w+", query.lower()):
		if t not in seen:
			seen.add(t)
			uniq.append(t)
		if len(uniq) >= max_terms:
			break
	return uniq


def no_results_response(query: str) -> str:
	"""Explain an empty search, nudging towards a shorter or single-word query.

	Phrases only match words that are directly adjacent in a document, so a multi-word
	miss suggests trying the words one at a time.
	"""
	words = _query_words(query)
	if not words:
		return "Type a word or phrase to search for."
	if len(words) == 1:
		return f"No document contains “{words[0]}”. Check the spelling or try a related word."
	return (
		f"No document contains the exact phrase “{query.strip()}”. "
		f"Phrases must appear word for word; try searching for {', '.join(words)} separately."
	)
