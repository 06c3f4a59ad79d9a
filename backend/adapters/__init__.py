"""External service adapters (LLM providers, news)."""
