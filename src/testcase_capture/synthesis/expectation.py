"""Expectation synthesis from a captured response."""

from testcase_capture.core.models import (
    Expectation,
    HttpResponse,
    MeasureHeader,
    MeasureHeaders,
    MeasureStatusCode,
)
from testcase_capture.synthesis.sniffer import sniff_body


def generate_expectation(response: HttpResponse) -> Expectation:
    """Derive status, header and body assertions from ``response``.

    Header names carrying more than one value count toward ``has-total`` but
    get no item of their own: an equality check cannot express them.
    """
    expectation = Expectation(
        status_code=MeasureStatusCode(is_equal_to=response.status_code)
    )

    if response.header:
        expectation.headers = MeasureHeaders(
            has_total=len(response.header),
            items=[
                MeasureHeader(name=name, is_equal_to=values[0])
                for name, values in response.header.items()
                if len(values) == 1
            ],
        )

    expectation.body = sniff_body(response.body)
    return expectation
