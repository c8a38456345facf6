"""Cancellation parts package (token, state holder, error type)."""
