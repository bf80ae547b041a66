"""cssval: component-value tokenizing, axis normalization and viewport unit resolution."""

__version__ = "0.1.0"
