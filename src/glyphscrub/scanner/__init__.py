"""Scanner — ignore rules, permission probe, classifier, walker, processor."""

from glyphscrub.scanner.classifier import is_text_file
from glyphscrub.scanner.ignore import IgnoreRules, is_excluded, parse_patterns
from glyphscrub.scanner.probe import PermissionProbe
from glyphscrub.scanner.processor import FileProcessor
from glyphscrub.scanner.walker import Walker, should_process

__all__ = [
    "FileProcessor",
    "IgnoreRules",
    "PermissionProbe",
    "Walker",
    "is_excluded",
    "is_text_file",
    "parse_patterns",
    "should_process",
]
