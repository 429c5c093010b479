# rota_core/errors.py
from __future__ import annotations


class RotaError(Exception):
    """Base class for errors raised by rota_core."""


class InvalidConfiguration(RotaError, ValueError):
    """Group count or policy cannot produce a schedule."""
