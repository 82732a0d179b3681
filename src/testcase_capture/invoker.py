"""Invocation entry point: build, send, observe and capture one request."""

import logging

import httpx

from testcase_capture.core.errors import MalformedRequest
from testcase_capture.core.models import HttpRequest, HttpResponse, InvokerOptions
from testcase_capture.core.request_builder import build_request
from testcase_capture.core.transport import TransportExecutor
from testcase_capture.interceptors.dispatcher import InterceptorDispatcher
from testcase_capture.synthesis.snapshot import TestGenerator


class HttpInvoker:
    """Issues single HTTP requests described by ``HttpRequest`` descriptors.

    Usage:
        invoker = HttpInvoker(InvokerOptions(version="v1.0"))
        collector = SnapshotCollector()
        invoker.do(HttpRequest(path="/orders"), ConsoleExplainer(), collector)
        print(collector.getvalue())
    """

    def __init__(
        self,
        options: InvokerOptions | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.options = options.model_copy() if options else InvokerOptions()
        self.generator = TestGenerator(version=self.options.version)
        self._transport = transport
        self.logger = logging.getLogger(__name__)

    def do(self, descriptor: HttpRequest | None, *interceptors: object) -> HttpResponse:
        """Send the request and dispatch interceptors around the call.

        Args:
            descriptor: Declarative request to send
            *interceptors: Observers, dispatched in the given order

        Returns:
            The captured response

        Raises:
            MalformedRequest: If the descriptor cannot be built into a request
            TransportError: If the call fails, times out, or its body is unreadable
        """
        if descriptor is None:
            raise MalformedRequest("Request must not be None")

        request = build_request(
            descriptor, self.options.pdp, default_path=self.options.default_path
        )
        dispatcher = InterceptorDispatcher(
            interceptors, self.generator, user_agent=self.options.user_agent
        )

        dispatcher.pre_call(request)

        executor = TransportExecutor(
            timeout=self.options.timeout,
            user_agent=self.options.user_agent,
            transport=self._transport,
        )
        response = executor.execute(request)

        errors = dispatcher.post_call(descriptor, response)
        if errors:
            self.logger.warning(
                f"{len(errors)} snapshot(s) could not be generated for {request.url}"
            )
        return response
