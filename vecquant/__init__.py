"""Binary, scalar, product, optimized product, residual and tree-structured vector quantizers."""

__version__ = "0.1.0"