"""
Method Channel - Named Call Channel Between the Application and the Widget

A method channel carries named calls with optional arguments from the main
application to a single handler and returns a MethodResult.

Files that USE this module:
- fxwidget.application.refresh_bridge (attach installs the bridge handler)
- fxwidget.app (creates the widget channel and invokes updateWidget)
- tests.test_method_channel (unit tests)

Files that this module USES:
- fxwidget.domain.models (MethodCall, MethodResult)
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from fxwidget.domain.models import MethodCall, MethodResult

logger = logging.getLogger(__name__)

MethodCallHandler = Callable[[MethodCall], MethodResult]


class MethodChannel:
    """A named channel with at most one call handler."""

    def __init__(self, name: str):
        self.name = name
        self._handler: Optional[MethodCallHandler] = None

    def set_method_call_handler(self, handler: Optional[MethodCallHandler]) -> None:
        """
        Install (or with None, remove) the handler for incoming calls.

        Args:
            handler: Callable receiving a MethodCall and returning a MethodResult
        """
        self._handler = handler

    def invoke_method(self, method: str, arguments: Any = None) -> MethodResult:
        """
        Deliver a call to the handler.

        Args:
            method: Method name, e.g. "updateWidget"
            arguments: Optional call arguments

        Returns:
            The handler's result; not_implemented without a handler,
            an UNAVAILABLE error if the handler raises
        """
        call = MethodCall(method=method, arguments=arguments)
        if self._handler is None:
            logger.warning("No handler on channel %s for %s", self.name, method)
            return MethodResult.not_implemented()

        try:
            result = self._handler(call)
        except Exception as e:
            logger.error("Channel %s: %s failed: %s", self.name, method, e, exc_info=True)
            return MethodResult.error("UNAVAILABLE", str(e))

        if result is None:
            return MethodResult.success(None)
        return result
