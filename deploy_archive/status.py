"""
Progress reporting for deploy-archive

A build reports what it is doing through a Status object. The default
LogStatus writes to the package logger; hosts that have their own
terminal UI can pass any object with the same methods.
"""

import logging

log = logging.getLogger("deploy-archive")

STATUS_OK = "ok"
STATUS_ERROR = "error"


class Status:
    """No-op status reporter; subclasses override the hooks they need."""

    def update(self, message: str) -> None:
        pass

    def step(self, state: str, message: str) -> None:
        pass

    def close(self) -> None:
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


class LogStatus(Status):
    """Writes status updates to the deploy-archive logger"""

    def update(self, message: str) -> None:
        log.info(message)

    def step(self, state: str, message: str) -> None:
        if state == STATUS_ERROR:
            log.error(f"✗ {message}")
        else:
            log.info(f"✓ {message}")
