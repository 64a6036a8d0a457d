"""Node information, manifest rendering and state reconciliation for cluster network components."""

__version__ = "0.1.0"