"""SIM module."""

from .sim import ISim, InboundResult, Sim

__all__ = ["ISim", "InboundResult", "Sim"]
