#!/usr/bin/env python
"""Print the full extraction prompt sent to the model. Run from project root with venv activated."""
import sys
sys.path.insert(0, '.')

from app.projects.snap_solve.core.prompts import EXTRACTION_PROMPT

print("=" * 60)
print("EXTRACTION PROMPT")
print("=" * 60)
print(EXTRACTION_PROMPT)
print("=" * 60)
print(f"Length: {len(EXTRACTION_PROMPT)} chars")
