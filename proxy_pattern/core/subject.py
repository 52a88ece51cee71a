"""
Subject interface with its direct and proxying implementations.

Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.
"""

from abc import ABC, abstractmethod
import logging

from ..types.errors import InvalidSubjectError


logger = logging.getLogger(__name__)


class Subject(ABC):
    """
    Common interface for the real subject and its proxy.

    Client code written against this interface can be handed a proxy
    in place of the real subject without changes.
    """

    @abstractmethod
    def request(self) -> None:
        """Handle a request"""
        pass


class RealSubject(Subject):
    """Performs the actual work behind a request"""

    def request(self) -> None:
        """Handle the request directly"""
        print("RealSubject: Handling Request.")


class Proxy(Subject):
    """
    Stands in for a real subject and forwards requests to it.

    The access check runs before delegation and the access log after it.
    Both are placeholders that print a fixed line; the check always passes.
    """

    def __init__(self, real_subject: Subject):
        if not isinstance(real_subject, Subject):
            raise InvalidSubjectError(
                "proxy requires a Subject to delegate to",
                subject_type=type(real_subject).__name__,
            )
        self._real_subject = real_subject

    @property
    def real_subject(self) -> Subject:
        """The subject requests are forwarded to"""
        return self._real_subject

    def request(self) -> None:
        """Check access, forward the request, then log the access"""
        if self.check_access():
            logger.debug("Access granted, delegating to %s", type(self._real_subject).__name__)
            self._real_subject.request()
            self.log_access()
        else:
            logger.debug("Access denied, request not delegated")

    def check_access(self) -> bool:
        """Decide whether the request may reach the real subject"""
        # Real checks would go here
        print("Proxy: Checking access prior to firing a real request.")
        logger.debug("Checked access")
        return True

    def log_access(self) -> None:
        """Record that the real subject was accessed"""
        print("Proxy: Logging the time of request.")
        logger.debug("Logged access")
