"""
Винятки proxplex.

Усі вони — нащадки ValueError: це помилки вхідних даних, а не збої середовища.
"""
from __future__ import annotations


class ProxplexError(ValueError):
    """Базовий виняток пакета."""


class ConstructionError(ProxplexError):
    """Комплекс не може бути побудований з такими параметрами."""


class VertexLimitExceeded(ConstructionError):
    def __init__(self, n: int, limit: int):
        super().__init__(
            f"{n} vertices requested, at most {limit} can be indexed by one byte"
        )
        self.n = n
        self.limit = limit


class InvalidVertexCount(ConstructionError):
    def __init__(self, n: int):
        super().__init__(f"Need at least 1 vertex, got {n}")
        self.n = n


class InvalidRadius(ConstructionError):
    def __init__(self, radius: float):
        super().__init__(f"Radius must be positive, got {radius!r}")
        self.radius = radius


class SamplingExhausted(ConstructionError):
    """Rejection sampling не набрав n точок за відведену кількість спроб."""
    def __init__(self, accepted: int, requested: int, attempts: int):
        super().__init__(
            f"Accepted only {accepted} of {requested} points after {attempts} attempts"
        )
        self.accepted = accepted
        self.requested = requested
        self.attempts = attempts


class InvalidThreshold(ProxplexError):
    def __init__(self, threshold: float):
        super().__init__(f"Threshold must be a number, got {threshold!r}")
        self.threshold = threshold
