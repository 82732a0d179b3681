"""Sequential dispatch of interceptors around the network call."""

import logging
from collections.abc import Sequence

import httpx

from testcase_capture.core.errors import SerializationError
from testcase_capture.core.models import HttpRequest, HttpResponse
from testcase_capture.interceptors.base import ExplanationWriter, SnapshotGenerator
from testcase_capture.interceptors.rendering import render_request, render_response
from testcase_capture.synthesis.snapshot import TestGenerator
from testcase_capture.utils.constants import USER_AGENT

logger = logging.getLogger(__name__)


class InterceptorDispatcher:
    """Invokes interceptors, in list order, before and after the call.

    Capabilities are checked per interceptor at each dispatch point; an
    interceptor with no recognized capability is skipped.
    """

    def __init__(
        self,
        interceptors: Sequence[object],
        generator: TestGenerator,
        user_agent: str = USER_AGENT,
    ) -> None:
        self.interceptors = list(interceptors)
        self.generator = generator
        self.user_agent = user_agent

    def pre_call(self, request: httpx.Request) -> None:
        """Render the outgoing request for every explanation writer."""
        for interceptor in self.interceptors:
            if isinstance(interceptor, ExplanationWriter):
                w = interceptor.get_console_out()
                if w is not None:
                    render_request(w, request, user_agent=self.user_agent)

    def post_call(
        self, descriptor: HttpRequest, response: HttpResponse
    ) -> list[SerializationError]:
        """Render the response and write snapshots.

        Each snapshot generator gets its own synthesis and serialization.
        Serialization failures are logged and collected; they do not stop the
        remaining interceptors.

        Returns:
            Serialization errors raised while writing snapshots
        """
        errors: list[SerializationError] = []
        for interceptor in self.interceptors:
            if isinstance(interceptor, ExplanationWriter):
                w = interceptor.get_console_out()
                if w is not None:
                    render_response(w, response)
            if isinstance(interceptor, SnapshotGenerator):
                target = interceptor.get_target_writer()
                if target is None:
                    continue
                try:
                    self.generator.write_test_case(target, descriptor, response)
                except SerializationError as e:
                    logger.error(
                        f"Snapshot for {type(interceptor).__name__} not written: {e}"
                    )
                    if isinstance(interceptor, ExplanationWriter):
                        err = interceptor.get_console_err()
                        if err is not None:
                            print(f"Cannot generate testcase snapshot: {e}", file=err)
                    errors.append(e)
        return errors
