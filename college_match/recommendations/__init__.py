"""
College recommendation engine.

Responsibilities:
- Map the free-text specialized fields of an assessment to college-type
  category labels via a fixed keyword table.
- Filter the college catalog by those labels, with a broad fallback.
- Enrich each surviving college with its per-college detail document.
- Return the first matches together with provenance counts.
"""
