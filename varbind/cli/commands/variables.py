"""Variables command: document-wide variable report."""

import asyncio
import logging
from argparse import Namespace
from pathlib import Path

from varbind.cli.output import write_output
from varbind.exceptions import DocumentValidationError
from varbind.loader import DocumentLoader
from varbind.report.variables import GlobalVariableReporter


logger = logging.getLogger(__name__)


def list_variables(args: Namespace) -> int:
    """Print one row per variable defined in the document."""
    try:
        document_path = Path(args.document)
        if not document_path.exists():
            logger.error(f"Document file not found: {document_path}")
            return 1

        try:
            document = DocumentLoader().load(document_path)
        except DocumentValidationError as e:
            for line in str(e).splitlines():
                logger.error(line)
            return e.exit_code

        reporter = GlobalVariableReporter(document.create_store())
        rows = asyncio.run(reporter.report_all(document.variables))

        if args.group:
            rows = [row for row in rows if row.group == args.group]

        write_output([row.to_dict() for row in rows], args.format)
        return 0

    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        return 1
