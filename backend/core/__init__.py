"""Core domain logic: security, pricing and model routing."""
