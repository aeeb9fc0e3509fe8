"""
Scrape Ollama's command line output and reformat it for display.

Ollama's text output is not a stable interface. Every parser here degrades
to a placeholder when a pattern does not match instead of raising.
"""
import re
import logging
from collections import namedtuple

logger = logging.getLogger("mocker.core.scraper")

UNKNOWN = "unknown"

ARCH_RE = re.compile(r"architecture\s+(\S+)")
QUANT_RE = re.compile(r"quantization\s+(\S+)")
PARAMS_RE = re.compile(r"parameters\s+(\S+)")
VERSION_RE = re.compile(r"version is\s+(\S+)")

# Older releases print "pulling <digest>... 100%", newer ones "pulling <digest>: 100%"
PULL_SIZE_RE = re.compile(
    r"pulling ([a-f0-9]+)(?:\.\.\.|:) 100% ▕[█▏ ]+\s+(\d+(?:\.\d+)?)\s+([KMG]B)"
)

UNIT_TO_KB = {
    "KB": 1,
    "MB": 1000,
    "GB": 1000000,
}

LIST_COLUMNS = (
    ("MODEL", 11),
    ("PARAMETERS", 11),
    ("QUANTIZATION", 15),
    ("ARCHITECTURE", 13),
    ("MODEL ID", 12),
    ("CREATED", 11),
)

ModelRecord = namedtuple("ModelRecord", [
    "name", "model_id", "size", "size_unit", "created",
    "architecture", "quantization", "parameters",
], defaults=(UNKNOWN, UNKNOWN, None))

def _first_group(pattern, text, default=UNKNOWN):
    match = pattern.search(text)
    if match:
        return match.group(1)
    return default

def parse_model_details(show_output):
    """
    Extract details from ``ollama show`` output.

    Args:
        show_output (str): Output of ``ollama show <model>``

    Returns:
        tuple: (architecture, quantization, parameters); parameters is None
            when the output does not report them
    """
    return (
        _first_group(ARCH_RE, show_output),
        _first_group(QUANT_RE, show_output),
        _first_group(PARAMS_RE, show_output, None),
    )

def parse_list_output(list_output):
    """
    Parse ``ollama list`` output into model records.

    The first line is the column header. Rows with fewer than five fields
    are skipped; everything after the size unit is the creation time.

    Args:
        list_output (str): Output of ``ollama list``

    Returns:
        list: ModelRecord entries without details
    """
    records = []
    lines = list_output.splitlines()
    for line in lines[1:]:
        fields = line.split()
        if len(fields) < 5:
            if fields:
                logger.debug(f"Skipping unparseable list row: {line!r}")
            continue
        records.append(ModelRecord(
            name=fields[0],
            model_id=fields[1],
            size=fields[2],
            size_unit=fields[3],
            created=" ".join(fields[4:]),
        ))
    return records

def parse_float(value):
    """Parse a number, answering 0.0 for anything unparseable."""
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0

def estimate_parameters(size, unit):
    """
    Rough parameter count from the download size, assuming one byte per
    parameter. Only meant as a display hint.
    """
    value = parse_float(size)
    if unit.upper() == "GB":
        return f"{value:.2f} B"
    return f"{value:.2f} M"

def format_list_header():
    header = " ".join(f"{title:<{width}}" for title, width in LIST_COLUMNS)
    return f"{header} SIZE"

def format_list_row(record):
    parameters = record.parameters or estimate_parameters(record.size, record.size_unit)
    values = (
        record.name, parameters, record.quantization,
        record.architecture, record.model_id, record.created,
    )
    row = " ".join(f"{value:<{width}}" for value, (_, width) in zip(values, LIST_COLUMNS))
    return f"{row} {record.size} {record.size_unit}"

def parse_pull_line(line):
    """
    Match a completed layer line from ``ollama pull``.

    Args:
        line (str): One line of pull output

    Returns:
        tuple: (digest, size, unit) or None if the line is not a completed layer
    """
    match = PULL_SIZE_RE.search(line)
    if not match:
        return None
    return match.group(1), float(match.group(2)), match.group(3)

def to_kilobytes(size, unit):
    return size * UNIT_TO_KB.get(unit, 1)

class PullProgress:
    """
    Accumulates the size of completed layers while a pull is streamed.
    """

    def __init__(self):
        self.layers = {}

    def feed(self, line):
        """
        Record the layer reported by ``line``, if any.

        Returns:
            bool: True if the line reported a completed layer
        """
        parsed = parse_pull_line(line)
        if parsed is None:
            return False
        digest, size, unit = parsed
        self.layers[digest] = to_kilobytes(size, unit)
        return True

    @property
    def total_kb(self):
        return sum(self.layers.values())

def format_download_summary(total_kb):
    if total_kb > 1000:
        return f"Downloaded: {total_kb / 1000:.2f} MB"
    return f"Downloaded: {total_kb:.2f} KB"

def parse_engine_version(output):
    """
    Extract the version from ``ollama --version`` output, falling back to
    the trimmed output itself.
    """
    match = VERSION_RE.search(output)
    if match:
        return match.group(1)
    return output.strip() or UNKNOWN
