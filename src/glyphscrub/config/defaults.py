"""Fixed names and sizes used across the scan pipeline."""

IGNORE_FILENAME = ".gitignore"

# Bytes read from the head of a file to decide text vs. binary.
SNIFF_SIZE = 4096

PROBE_PREFIX = ".glyphscrub-probe-"
WRITE_PREFIX = ".glyphscrub-write-"

ENV_DRY_RUN = "GLYPHSCRUB_DRY_RUN"
ENV_LINE_ENDING = "GLYPHSCRUB_LINE_ENDING"
ENV_FORMAT = "GLYPHSCRUB_FORMAT"
