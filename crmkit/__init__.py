"""Service configuration, user statistics query rendering, content metadata and notification messages for CRM campaigns."""

__version__ = "0.1.0"