"""
Client code that works with any Subject.
"""

import logging

from .subject import Subject


logger = logging.getLogger(__name__)


class Client:
    """Drives requests through the Subject interface only"""

    def client_code(self, subject: Subject) -> None:
        """Send a request through the Subject interface"""
        logger.debug("Issuing request to %s", type(subject).__name__)
        subject.request()
