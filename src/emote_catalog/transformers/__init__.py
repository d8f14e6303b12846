"""Transformers that normalize raw manifest entries."""

from .base import Candidate, Dropped, Outcome, Rejected, Transformer
from .normalizer import EmoteNormalizer

__all__ = ["Candidate", "Dropped", "EmoteNormalizer", "Outcome", "Rejected", "Transformer"]
