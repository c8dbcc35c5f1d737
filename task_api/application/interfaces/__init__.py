"""Application ports (Protocols) implemented by infrastructure."""

from task_api.application.interfaces.repositories import ITaskRepository

__all__ = ["ITaskRepository"]
