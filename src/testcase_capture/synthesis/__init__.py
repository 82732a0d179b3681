from .expectation import generate_expectation
from .sniffer import BODY_CLASSIFIERS, sniff_body
from .snapshot import TestGenerator

__all__ = ["BODY_CLASSIFIERS", "TestGenerator", "generate_expectation", "sniff_body"]
