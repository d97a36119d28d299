"""Contact API package - contact form endpoint mounted under /api/contact."""

from storifal.api.contact.routes import router

__all__ = ["router"]
