"""LLM integration layer.

This package is intentionally small:
- One stateless chat-completion call per request, no retries.
- No prompt/output logging; callers log response metadata only.
- Configurable via environment variables.
"""
