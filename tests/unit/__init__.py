"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- No real I/O beyond in-memory SQLite; use fakes at the store boundary.
- Prefer behavior-centric assertions over implementation details.
"""
