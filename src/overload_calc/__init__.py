"""overload-calc: progressive-overload training calculator."""

__version__ = "0.1.0"
