"""HTTP middleware: request ID.

Applied in main app; order matters (last added = outermost).
Import and use from task_api.main.
"""

from task_api.middleware.request_id import RequestIDMiddleware

__all__ = ["RequestIDMiddleware"]
