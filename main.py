#!/usr/bin/env python3
"""
Document AI Parser - Command Line Entry Point.

Parses saved Document AI responses and prints or exports the result.

Usage:
    Command Line:
        python main.py --input response.json
        python main.py --input response.json --output outputs/receipt.xlsx
        python main.py --input ./responses/ --output outputs/all.json

    Python:
        from main import run_parser
        documents = run_parser("response.json")
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

import docai_parser
from docai_parser.config import ConfigurationManager
from docai_parser.models import Document
from docai_parser.processors import ProcessorType
from docai_parser.utils.exceptions import DocumentParserError
from docai_parser.utils.logger import ROOT_LOGGER_NAME, get_logger, setup_logger_from_config


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        argv: Argument list; defaults to sys.argv[1:].

    Returns:
        Parsed argument namespace.
    """
    parser = argparse.ArgumentParser(
        description="Parse Google Document AI responses into typed documents",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    Print a summary of one response:
        python main.py --input response.json

    Export several responses to Excel:
        python main.py --input ./responses/ --output outputs/expenses.xlsx
        """
    )

    parser.add_argument(
        "--input", "-i",
        type=str,
        required=True,
        help="Response JSON file or directory of .json files"
    )

    parser.add_argument(
        "--output", "-o",
        type=str,
        default=None,
        help="Output .xlsx or .json file (default: print JSON to stdout)"
    )

    parser.add_argument(
        "--processor", "-p",
        type=str,
        default=None,
        choices=[p.value for p in ProcessorType],
        help="Processor that produced the response (default: from config)"
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        default=None,
        help="Path to custom configuration file"
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )

    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only log errors"
    )

    return parser.parse_args(argv)


def initialize_system(args: argparse.Namespace) -> ConfigurationManager:
    """
    Load configuration and set up logging.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Initialized configuration manager.
    """
    config = ConfigurationManager(args.config)
    setup_logger_from_config()

    if args.debug:
        logging.getLogger(ROOT_LOGGER_NAME).setLevel(logging.DEBUG)
        for handler in logging.getLogger(ROOT_LOGGER_NAME).handlers:
            handler.setLevel(logging.DEBUG)
    elif args.quiet:
        logging.getLogger(ROOT_LOGGER_NAME).setLevel(logging.ERROR)

    logger = get_logger(__name__)
    logger.info(f"Document AI Parser v{config.get('project.version', docai_parser.__version__)}")
    logger.info(f"Input: {args.input}")

    return config


def collect_inputs(input_path: str) -> List[Path]:
    """
    Resolve the input argument to a list of response files.

    Args:
        input_path: File or directory path.

    Returns:
        Sorted list of files to parse.

    Raises:
        FileNotFoundError: If the path doesn't exist.
    """
    path = Path(input_path)

    if not path.exists():
        raise FileNotFoundError(f"Input path not found: {path}")

    if path.is_file():
        return [path]

    files = sorted(p for p in path.iterdir() if p.suffix.lower() == '.json')
    if not files:
        get_logger(__name__).warning(f"No .json files found in: {path}")
    return files


def run_parser(
    input_path: str,
    output_path: Optional[str] = None,
    processor_type: Optional[str] = None
) -> List[Document]:
    """
    Parse every response under input_path and optionally export them.

    Args:
        input_path: Response file or directory.
        output_path: Optional .xlsx/.json target.
        processor_type: Processor identifier; defaults to configuration.

    Returns:
        Parsed documents, in file order.

    Raises:
        DocumentParserError: If a response can't be parsed or exported.
    """
    logger = get_logger(__name__)
    documents = []

    for file_path in collect_inputs(input_path):
        logger.info(f"Parsing: {file_path.name}")
        document = docai_parser.parse(
            file_path.read_text(encoding='utf-8'),
            processor_type=processor_type
        )
        logger.info(
            f"  {document.supplier_name or 'Unknown supplier'}: "
            f"total={document.total_amount} {document.currency or ''}, "
            f"{len(document.line_items)} line items"
        )
        documents.append(document)

    if output_path and documents:
        from docai_parser.output_handler import OutputHandler
        saved = OutputHandler().save(documents, output_path)
        logger.info(f"Output: {saved}")

    return documents


def main(argv: Optional[List[str]] = None) -> int:
    """
    Entry point for command-line execution.

    Returns:
        Exit code (0 for success, 1 for errors).
    """
    args = parse_arguments(argv)

    try:
        initialize_system(args)
        documents = run_parser(args.input, args.output, args.processor)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (DocumentParserError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not documents:
        print("Error: no documents parsed", file=sys.stderr)
        return 1

    if not args.output:
        if len(documents) == 1:
            print(documents[0].to_json())
        else:
            print(json.dumps([doc.to_dict() for doc in documents], indent=2, ensure_ascii=False))

    return 0


if __name__ == "__main__":
    sys.exit(main())
