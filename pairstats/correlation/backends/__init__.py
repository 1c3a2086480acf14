"""Backends for paired-sample statistics."""

from pairstats.correlation.backends.cpu import CPUCorrelationBackend

__all__ = ["CPUCorrelationBackend"]
