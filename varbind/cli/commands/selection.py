"""Inspect command: binding report for a selected node."""

import asyncio
import logging
from argparse import Namespace
from pathlib import Path
from typing import List

from varbind.cli.output import write_output
from varbind.exceptions import DocumentValidationError
from varbind.loader import DocumentLoader
from varbind.model import Node
from varbind.report.selection import build_selection_report


logger = logging.getLogger(__name__)


def inspect_selection(args: Namespace) -> int:
    """
    Print the binding report for the nodes given with --node.

    Selecting zero or several nodes prints the no-selection signal.
    """
    try:
        document_path = Path(args.document)
        if not document_path.exists():
            logger.error(f"Document file not found: {document_path}")
            return 1

        logger.info(f"Loading document: {document_path}")
        try:
            document = DocumentLoader().load(document_path)
        except DocumentValidationError as e:
            for line in str(e).splitlines():
                logger.error(line)
            return e.exit_code

        selection: List[Node] = []
        for node_id in args.node or []:
            node = document.find_node(node_id)
            if node is None:
                logger.error(f"Node not found: {node_id}")
                return 1
            selection.append(node)

        report = asyncio.run(build_selection_report(selection, document.create_store()))
        write_output(report.to_dict(), args.format)
        return 0

    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        return 1
