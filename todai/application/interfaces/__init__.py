"""Ports implemented by infrastructure."""

from todai.application.interfaces.repositories import ITaskRepository

__all__ = ["ITaskRepository"]
