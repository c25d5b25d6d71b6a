"""Connectivity data models."""

from connectivity.models.connectivity_state import ConnectivityState

__all__ = ["ConnectivityState"]
