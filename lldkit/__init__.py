"""Design patterns, game case studies and parking-fee pricing, one module each."""

__version__ = "0.1.0"