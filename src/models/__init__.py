"""Data models for seedroll."""

from .seed import IntegerSeed, Seed, SourceSeed, StringSeed, Unseeded, resolve_seed

__all__ = [
    "Unseeded",
    "IntegerSeed",
    "StringSeed",
    "SourceSeed",
    "Seed",
    "resolve_seed",
]
