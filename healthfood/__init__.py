"""
Health & Food AI response parser.

Turns the markdown-like text returned by a language model into typed
recipes, meal plans and health analyses, and builds the prompts that
request them.

Structure:
- domain/parsing/: extractors and parsed record models
- domain/prompts/: chat message builders
- metrics/: in-process parse metrics
"""

__version__ = "1.0.0"
