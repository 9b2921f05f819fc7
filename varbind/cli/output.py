"""Report serialization for CLI output."""

import json
import sys
from typing import Any, TextIO, Optional
import yaml


def write_output(data: Any, fmt: str = 'json', stream: Optional[TextIO] = None) -> None:
    """Write report data to a stream as JSON or YAML."""
    stream = stream or sys.stdout
    if fmt == 'yaml':
        yaml.safe_dump(data, stream, sort_keys=False, allow_unicode=True)
    else:
        json.dump(data, stream, indent=2, ensure_ascii=False)
        stream.write('\n')
