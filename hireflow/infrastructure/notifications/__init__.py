# Notifications Package
from .log_notifier import LoggingNotifier
from .smtp_notifier import SMTPNotifier

__all__ = ["LoggingNotifier", "SMTPNotifier"]
