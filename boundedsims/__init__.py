"""Producer/consumer simulations around a thread-safe bounded buffer."""

__version__ = "0.1.0"